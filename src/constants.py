"""Constants used throughout the application."""

# Default user agent for HTTP requests
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/108.0.0.0 Safari/537.36"
)

# The site rejects requests that do not look like they come from a browser
BROWSER_HEADERS = {
    "User-Agent": DEFAULT_USER_AGENT,
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Encoding": "gzip, deflate, br",
    "Connection": "keep-alive",
}

# Default configuration values
DEFAULT_CONFIG_PATH = "config.yaml"
DEFAULT_REQUEST_TIMEOUT = 20

# anime3rb constants
ANIME3RB_BASE_URL = "https://anime3rb.com"
ANIME3RB_TITLE_URL_TEMPLATE = "{base_url}/titles/{slug}"
ANIME3RB_EPISODE_URL_TEMPLATE = "{base_url}/episode/{slug}/{episode}"

# Player URL markers on the episode page, tried in order.
# (start marker, end marker)
PLAYER_URL_MARKERS = [
    ("video_url&quot;:&quot;", "&quot;"),
    ('"video_url":"', '"'),
]

# Embedded video source array on the player page
VIDEO_SOURCES_BLOCK = "var video_sources = "
VIDEO_SOURCES_TERMINATOR = "];"

# Meta fields of a title page that are shown to the user
TITLE_NOT_FOUND_MARKER = "Page Not Found"
TITLE_INFO_LABELS = {
    "status": "الحالة",
    "studio": "الاستوديو",
    "author": "المؤلف",
    "age_rating": "التصنيف العمري",
}

# Facebook Graph API constants
GRAPH_API_MESSAGES_URL = "https://graph.facebook.com/v17.0/me/messages"

# Chat commands
HELP_COMMAND = "list"
