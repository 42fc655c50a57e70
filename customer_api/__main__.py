from customer_api.main import run

run()
