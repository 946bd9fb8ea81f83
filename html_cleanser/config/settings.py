# --- FILE LIMITS --------------------------------------------------------------
MAX_FILE_SIZE = 100 * 1024 * 1024  # 100MB in bytes
HTML_SUFFIXES = ('.html', '.htm')  # accepted input files

# --- OUTPUT -------------------------------------------------------------------
CLEANED_SUFFIX = '_cleaned'  # page.html -> page_cleaned.html

# --- PARSING ------------------------------------------------------------------
DEFAULT_ENGINE = 'lxml'  # 'lxml' (html5lib -> lxml tree) or 'bs4' (BeautifulSoup with html5lib)
