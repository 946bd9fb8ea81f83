from html_cleanser.config.settings import CLEANED_SUFFIX, DEFAULT_ENGINE, HTML_SUFFIXES, MAX_FILE_SIZE
from html_cleanser.html_tree import ParseError
from html_cleanser.tag_set import normalize_tags
from html_cleanser.tag_stripper import clean_html
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable
import re

_HTML_SUFFIX = re.compile(r'\.html?$', re.I)

@dataclass  # outcome for one document of a batch
class Result:
    name: str  # file name / identifier of the input document
    html: str = ''  # cleaned HTML, empty if processing failed
    error: str = ''  # why the document failed, empty on success

    @property
    def ok(self) -> bool: return not self.error

def process_documents(docs: Iterable[tuple[str, str]], tags: Iterable[str] | str, keep_inner_content: bool = True,
                      engine: str = DEFAULT_ENGINE, fragment: bool = False, strict: bool = False, workers: int = 1) -> list[Result]:
    '''cleans every (name, html) pair on its own; a broken document does not stop the others'''
    tags = normalize_tags(tags)
    def _process(doc: tuple[str, str]) -> Result:
        name, html = doc
        try: return Result(name, html=clean_html(html, tags, keep_inner_content, engine, fragment, strict))
        except ParseError as e: return Result(name, error=f'parse error: {e}')

    docs = list(docs)
    if workers <= 1 or len(docs) <= 1: return [_process(d) for d in docs]
    with ThreadPoolExecutor(max_workers=workers) as pool:  # one tree per task, nothing shared
        return list(pool.map(_process, docs))  # keeps input order

def process_files(paths: Iterable[Path], tags: Iterable[str] | str, keep_inner_content: bool = True,
                  engine: str = DEFAULT_ENGINE, fragment: bool = False, strict: bool = False, workers: int = 1) -> list[Result]:
    '''validates + reads the files, then cleans them; skipped/unreadable files become failed results'''
    results: dict[int, Result] = {}
    docs: list[tuple[int, str, str]] = []
    for i, path in enumerate(Path(p) for p in paths):
        if (reason := check_file(path)):
            results[i] = Result(path.name, error=reason)
            continue
        try: docs.append((i, path.name, path.read_text(encoding='utf-8')))
        except (OSError, UnicodeDecodeError) as e: results[i] = Result(path.name, error=f'could not read file: {e}')

    cleaned = process_documents(((name, html) for _, name, html in docs), tags, keep_inner_content, engine, fragment, strict, workers)
    for (i, _, _), res in zip(docs, cleaned): results[i] = res
    return [results[i] for i in sorted(results)]  # same order as paths

def check_file(path: Path) -> str | None:
    '''returns the reason why a file must be skipped, None if it is fine'''
    path = Path(path)
    if not path.name.lower().endswith(HTML_SUFFIXES): return f'{path.name} is not an HTML file and will be skipped.'
    if not path.is_file(): return f'{path.name} does not exist and will be skipped.'
    if path.stat().st_size > MAX_FILE_SIZE: return f'{path.name} exceeds the {MAX_FILE_SIZE // (1024 * 1024)}MB limit and will be skipped.'
    return None

def cleaned_file_name(name: str) -> str:
    '''page.html -> page_cleaned.html'''
    return f'{_HTML_SUFFIX.sub("", name)}{CLEANED_SUFFIX}.html'

def load_html_files(folder: Path) -> list[Path]:
    '''all .html/.htm files directly inside folder (sorted)'''
    return sorted(p for p in Path(folder).iterdir() if p.is_file() and p.name.lower().endswith(HTML_SUFFIXES))

def write_results(results: Iterable[Result], out_dir: Path) -> list[Path]:
    '''writes every successful result as <name>_cleaned.html into out_dir'''
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for res in results:
        if not res.ok: continue
        out_path = out_dir / cleaned_file_name(res.name)
        with open(out_path, 'w', encoding='utf-8') as f:
            f.write(res.html)
            print(f'Output: "{out_path.name}" has been written')
        written.append(out_path)
    return written
