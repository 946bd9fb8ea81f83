from html_cleanser.config.tags import HTML_TAGS  # known element names
from typing import Iterable

def parse_tag_list(text: str) -> list[str]:
    '''splits a comma-separated tag list: trim, lowercase, drop empty entries, drop duplicates'''
    if not text: return []
    out: list[str] = []
    for tag in text.split(','):
        tag = tag.strip().lower()
        if tag and tag not in out: out.append(tag)  # first occurrence keeps its place
    return out

def normalize_tags(tags: Iterable[str] | str | None) -> list[str]:
    '''normalizes a sequence of tag names (items may contain commas themselves)'''
    if tags is None: return []
    if isinstance(tags, str): return parse_tag_list(tags)
    return parse_tag_list(','.join(str(t) for t in tags))

def add_common_tag(current: str, tag: str) -> str:
    '''quick-add: appends tag to a comma-separated list unless it is already in there'''
    tags = [t.strip() for t in (current or '').split(',') if t.strip()]
    if tag not in tags: tags.append(tag)
    return ', '.join(tags)

def unknown_tags(tags: Iterable[str]) -> list[str]:
    '''returns the names that are no known HTML element'''
    return [t for t in normalize_tags(tags) if t not in HTML_TAGS]
