SETTINGS_CACHE_KEY = "platform:settings"
SETTINGS_CACHE_TIMEOUT = 60 * 5
