"""Constants of the HTTP/1.1 listener."""

HTTP_STATUS_CODE_200 = "200 OK"
HTTP_STATUS_CODE_400 = "400 Bad Request"
HTTP_STATUS_CODE_401 = "401 Unauthorized"
HTTP_STATUS_CODE_403 = "403 Forbidden"
HTTP_STATUS_CODE_404 = "404 Not Found"
HTTP_STATUS_CODE_408 = "408 Request Timeout"
HTTP_STATUS_CODE_411 = "411 Length Required"
HTTP_STATUS_CODE_413 = "413 Payload Too Large"
HTTP_STATUS_CODE_431 = "431 Request Header Fields Too Large"
HTTP_STATUS_CODE_500 = "500 Internal Server Error"
HTTP_STATUS_CODE_505 = "505 HTTP Version Not Supported"

HTTP_PROTOCOL_VERSION = "HTTP/1.1"

HTTP_FIELD_NAME_CONNECTION = "Connection"
HTTP_FIELD_NAME_CONTENT_TYPE = "Content-Type"
HTTP_FIELD_NAME_CONTENT_LENGTH = "Content-Length"
HTTP_FIELD_NAME_SERVER = "Server"

HTTP_FIELD_VALUE_CLOSE = "close"
HTTP_FIELD_VALUE_SERVER = "level2 httpListener"

MIMETYPE_TEXT_PLAIN_UTF8 = "text/plain; charset=utf-8"

READ_BUFFER_SIZE = 2049
MAX_READ = READ_BUFFER_SIZE - 1
LINE_TERMINATOR = "\r\n"
HEADER_TERMINATOR = "\r\n\r\n"
HEADER_FIELD_SEPARATOR = ": "
METHOD_PATH_SEPARATOR = " /"
PATH_PROTOCOL_SEPARATOR = " " + HTTP_PROTOCOL_VERSION
PATH_QUERY_SEPARATOR = "?"
QUERY_PARAM_SEPARATOR = "&"
KEY_VALUE_SEPARATOR = "="

ONE_SECOND_MS = 1000
TIMEOUT_IN_SECONDS = 30