APP_NAME = "chromepdf"

DEFAULT_BINARIES = (
    "google-chrome",
    "chromium",
)

DEFAULT_FLAGS = (
    "--no-sandbox",
    "--headless",
    "--disable-gpu",
    "--disable-crash-reporter",
    "--run-all-compositor-stages-before-draw",
    "--print-to-pdf-no-header",
)

PRINT_TO_PDF_FLAG = "--print-to-pdf="
DATA_URI_PREFIX = "data:text/html,"
FILE_URI_PREFIX = "file://"

TEMP_FILE_PREFIX = "chrome-pdf"
TEMP_INPUT_SUFFIX = ".html"
TEMP_OUTPUT_SUFFIX = ".pdf"
