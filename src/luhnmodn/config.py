# Shared library constants

# --- Logging Configuration ---
# Read at logger setup time so tests can monkeypatch the environment.
LOG_LEVEL_ENV = "LUHNMODN_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "[%(asctime)s.%(msecs)03d] %(levelname)s [%(name)s]: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"

# --- Analysis Defaults ---
DEFAULT_PAYLOAD_COUNT = 100
DEFAULT_PAYLOAD_LENGTH = 10

# Upper bound on scenarios of each error type built per checked string, to
# keep analysis of large alphabets from exploding.
MAX_ERROR_SCENARIOS = 5000
