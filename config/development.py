import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# JSON file backing the users key-value store; empty keeps users in memory
USERS_STORE_PATH = os.getenv("USERS_STORE_PATH", "instance/users.json")

# Start with the three demo firefighters on the roster
SEED_DEMO_MEMBERS = bool(int(os.getenv("SEED_DEMO_MEMBERS", "1")))

SESSION_DAYS = int(os.getenv("SESSION_DAYS", "7"))
