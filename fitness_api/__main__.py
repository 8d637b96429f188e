from fitness_api.main import run

run()
