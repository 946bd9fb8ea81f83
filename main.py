from html_cleanser.process_html_files import process_files, load_html_files, write_results
from html_cleanser.tag_set import add_common_tag, normalize_tags, unknown_tags
from html_cleanser.config.tags import COMMON_TAGS
from pathlib import Path

ROOT = Path(__file__).resolve().parents[0]
KEEP_INNER_CONTENT = True  # True: <a>Click</a> -> "Click", False: element and content are removed
ENGINE = 'lxml'  # 'lxml' or 'bs4'
FRAGMENT = False  # True: write only the body content instead of the whole document
STRICT = False  # True: documents with HTML parse errors fail instead of being repaired
WORKERS = 1  # >1 cleans several documents in parallel
QUICK_ADD_TAGS: list[str] = []  # picks from COMMON_TAGS, added on top of config/tags.txt (e.g. ['script', 'style'])

def run_pipeline():  # main pipeline runner (cleans every html file in data/)
    tags = _get_tags_to_remove()
    if not tags:
        print('No tags to remove in config/tags.txt')
        return
    for tag in unknown_tags(tags): print(f'Warning: "{tag}" is not a known HTML tag')

    paths = load_html_files(ROOT / 'data')
    results = process_files(paths, tags, KEEP_INNER_CONTENT, ENGINE, FRAGMENT, STRICT, WORKERS)
    for res in results:
        if not res.ok: print(f'Skipped: "{res.name}": {res.error}')
    write_results(results, ROOT / 'data' / 'cleaned')

def _get_tags_to_remove() -> list[str]:
    tag_path = ROOT / 'config' / 'tags.txt'
    lines: list[str] = []
    with open(tag_path, 'r', encoding='utf-8') as f:
        for ln in f.read().split('\n'):
            if ln.strip().startswith('#'): continue  # comment line
            lines.append(ln)
    text = ', '.join(lines)
    for tag in QUICK_ADD_TAGS:
        if tag not in COMMON_TAGS: print(f'Warning: "{tag}" is not one of the quick-add tags ({", ".join(COMMON_TAGS)})')
        text = add_common_tag(text, tag)
    return normalize_tags(text)

run_pipeline()
