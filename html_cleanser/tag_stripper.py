from html_cleanser.html_tree import as_tree, parse_html, serialize, LxmlTree, SoupTree
from html_cleanser.config.settings import DEFAULT_ENGINE
from html_cleanser.tag_set import normalize_tags
from typing import Iterable

def strip_tags(tree, tags: Iterable[str] | str, keep_inner_content: bool):
    '''
    Removes every element whose tag is in tags, mutating the tree in place.

    keep_inner_content=True splices the children (text included) into the parent
    at the element's position, False drops the element with its whole subtree.
    Each tag gets a fresh query on the current tree, so nested matches and the
    order of tags don't change the result. The tree root itself is never removed.
    Returns the same tree handle that was passed in.
    '''
    if tree is None: raise TypeError('strip_tags() needs a tree, got None')
    if not isinstance(keep_inner_content, bool): raise TypeError(f'keep_inner_content must be bool, got {type(keep_inner_content).__name__}')
    doc = as_tree(tree)  # raw lxml / bs4 objects get wrapped
    for tag in normalize_tags(tags):  # empty tag set => nothing happens
        for node in doc.find_all(tag):  # document order
            if keep_inner_content:
                if doc.get_parent(node) is None: continue  # root: nothing to splice into
                doc.unwrap(node)
            else: doc.drop(node)
    return tree

def clean_html(html: str, tags: Iterable[str] | str, keep_inner_content: bool = True, engine: str = DEFAULT_ENGINE,
               fragment: bool = False, strict: bool = False) -> str:
    '''main function: HTML -> HTML without the given tags'''
    tree: LxmlTree | SoupTree = parse_html(html, engine=engine, fragment=fragment, strict=strict)
    strip_tags(tree, tags, keep_inner_content)
    return serialize(tree)
