from doorsite.main import run

run()
