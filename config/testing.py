SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

USERS_STORE_PATH = ""

SEED_DEMO_MEMBERS = False

SESSION_DAYS = 1
