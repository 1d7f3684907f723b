import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

USERS_STORE_PATH = os.getenv("USERS_STORE_PATH", "instance/users.json")

SEED_DEMO_MEMBERS = bool(int(os.getenv("SEED_DEMO_MEMBERS", "0")))

SESSION_DAYS = int(os.getenv("SESSION_DAYS", "7"))
