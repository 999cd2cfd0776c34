from webapi.main import run

run()
