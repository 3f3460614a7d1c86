APP_NAME = "CapacityCalc"
APP_VERSION = "0.1.0"
SETTINGS_FILENAME = "settings.json"
