import os

BASE_URL = os.getenv("CATALOG_API_URL", "http://localhost:8000/api/v1")

MAX_ATTACHMENT_BYTES = int(os.getenv("CATALOG_MAX_ATTACHMENT_BYTES", str(10 * 1024 * 1024)))

# advisory only; the API does not check file types
ACCEPTED_FILE_TYPES = ["pdf", "doc", "docx", "zip", "rar"]

PASSOUT_YEARS = [str(year) for year in range(2000, 2051)]

LIST_REFRESH_SECONDS = 5
