"""Wire-level constants shared by the routers and the static responder."""

LOBBY_QUERY_KEY = "lobby-id"

MSG_NO_QUERY = "No query parameters"
MSG_BAD_QUERY = "Bad query parameters"
MSG_UNKNOWN_LOBBY = "No lobby exists with provided ID"

CONTENT_TYPE_HTML = "text/html"
CONTENT_TYPE_JAVASCRIPT = "application/javascript"

NOT_FOUND_PAGE = """<!DOCTYPE html>
<html>
    <head>
        <title>404 Not Found</title>
    </head>
    <body>
        <h1>404</h1>
    </body>
</html>"""

__all__ = [
    "LOBBY_QUERY_KEY",
    "MSG_NO_QUERY",
    "MSG_BAD_QUERY",
    "MSG_UNKNOWN_LOBBY",
    "CONTENT_TYPE_HTML",
    "CONTENT_TYPE_JAVASCRIPT",
    "NOT_FOUND_PAGE",
]
