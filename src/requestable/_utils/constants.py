# Environment variables
ENV_BASE_URL = "REQUESTABLE_URL"
ENV_ACCESS_TOKEN = "REQUESTABLE_ACCESS_TOKEN"
ENV_USERNAME = "REQUESTABLE_USERNAME"
ENV_PASSWORD = "REQUESTABLE_PASSWORD"

# Headers
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"

# Logging
LOGGER_NAME = "requestable"
MASKED_VALUE = "***"
