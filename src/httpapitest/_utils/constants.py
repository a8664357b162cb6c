# Logging
LOGGER_NAME = "httpapitest"

# Body comparison
COMPARE_CHUNK_SIZE = 128

# Headers
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_CONTENT_DISPOSITION = "Content-Disposition"
HEADER_CONTENT_LENGTH = "Content-Length"

# Content types
JSON_CONTENT_TYPE = "application/json; charset=utf-8"
MULTIPART_FORM_DATA = "multipart/form-data"

# Multipart
MULTIPART_BOUNDARY_BYTES = 30
