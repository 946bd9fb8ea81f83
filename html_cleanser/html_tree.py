from html_cleanser.config.settings import DEFAULT_ENGINE
from html5lib.html5parser import ParseError as _Html5libParseError
from bs4.formatter import HTMLFormatter
from bs4.dammit import EntitySubstitution
from bs4 import BeautifulSoup, Tag
from lxml import etree as ET
from html5lib.constants import DataLossWarning
import html, html5lib, threading, warnings

ENGINES = ('lxml', 'bs4')
_LXML_LOCK = threading.Lock()  # warning filters are process-wide, parse one lxml document at a time

class _SourceOrderFormatter(HTMLFormatter):
    '''HTMLFormatter that keeps attributes in source order (bs4 sorts them by default)'''
    def attributes(self, tag: Tag):
        return list(tag.attrs.items()) if tag.attrs else []

_SOUP_FORMATTER = _SourceOrderFormatter(entity_substitution=EntitySubstitution.substitute_xml, void_element_close_prefix='')  # <br> instead of <br/>, only &<> escaped

class ParseError(Exception):
    '''the document is not well-formed HTML (only raised in strict mode)'''

class LxmlTree:
    '''lxml tree as built by html5lib; text is stored on .text/.tail instead of own nodes'''
    def __init__(self, root: ET._Element, fragment: bool = False):
        self.root = root  # never matched, never removed
        self.fragment = fragment  # serialize inner HTML of root only

    def find_all(self, tag: str) -> list[ET._Element]:
        '''all elements with that tag in document order (root excluded)'''
        return [n for n in self.root.iter() if n is not self.root and _get_tag(n) == tag]

    def get_parent(self, node: ET._Element) -> ET._Element | None:
        if node is self.root: return None
        return node.getparent()

    def unwrap(self, node: ET._Element) -> None:
        '''moves text + children in front of the node, then removes the node'''
        parent = node.getparent()
        tail = node.tail
        _add_text(parent, parent.index(node), node.text)  # leading text goes first
        for child in list(node): node.addprevious(child)  # child takes its tail along
        node.text = node.tail = None
        _add_text(parent, parent.index(node), tail)  # text after the node follows its last child
        parent.remove(node)

    def drop(self, node: ET._Element) -> None:
        '''removes the node with its whole subtree (text after the node stays)'''
        parent = node.getparent()
        if parent is None: return
        tail, node.tail = node.tail, None
        _add_text(parent, parent.index(node), tail)
        parent.remove(node)

    def serialize(self) -> str:
        if not self.fragment: return ET.tostring(self.root, encoding='unicode', method='html')  # outer HTML
        inner = html.escape(self.root.text or '', quote=False)
        return inner + ''.join(ET.tostring(child, encoding='unicode', method='html') for child in self.root)  # children incl. tails

class SoupTree:
    '''BeautifulSoup tree (html5lib builder); text nodes are real children'''
    def __init__(self, root: Tag, fragment: bool = False):
        self.root = root
        self.fragment = fragment

    def find_all(self, tag: str) -> list[Tag]:
        return list(self.root.find_all(lambda t: t.name.lower() == tag))  # descendants only, root excluded

    def get_parent(self, node: Tag) -> Tag | None:
        if node is self.root: return None
        return node.parent

    def unwrap(self, node: Tag) -> None:
        while node.contents: node.insert_before(node.contents[0])  # first remaining child lands right before the node
        node.extract()

    def drop(self, node: Tag) -> None:
        node.extract()

    def serialize(self) -> str:
        if self.fragment: return self.root.decode_contents(formatter=_SOUP_FORMATTER)
        return self.root.decode(formatter=_SOUP_FORMATTER)


def parse_html(html_text: str, engine: str = DEFAULT_ENGINE, fragment: bool = False, strict: bool = False) -> LxmlTree | SoupTree:
    '''
    parses HTML into a tree; strict=True raises ParseError on any parse error.

    fragment=True parses the text as the content of <body> and serializes only that.
    The lxml engine falls back to a BeautifulSoup tree for documents lxml can't hold
    as written (control characters, non-XML names, "--" inside comments).
    '''
    if engine not in ENGINES: raise ValueError(f'unknown engine "{engine}", expected one of: {", ".join(ENGINES)}')
    if engine == 'lxml' and (tree := _parse_lxml(html_text, fragment, strict)) is not None: return tree

    if strict: _html5lib_parse(html_text, 'etree', strict, fragment)  # BeautifulSoup itself never complains
    soup = BeautifulSoup(html_text, 'html5lib')
    root = _soup_fragment_root(soup) if fragment else soup.html
    return SoupTree(root, fragment)

def serialize(tree: LxmlTree | SoupTree) -> str:
    '''renders the tree back to HTML'''
    return tree.serialize()

def as_tree(obj) -> LxmlTree | SoupTree:
    '''wraps raw lxml / BeautifulSoup objects, passes trees through'''
    if isinstance(obj, (LxmlTree, SoupTree)): return obj
    if isinstance(obj, ET._ElementTree): return LxmlTree(obj.getroot())
    if isinstance(obj, ET._Element): return LxmlTree(obj)
    if isinstance(obj, Tag): return SoupTree(obj)  # BeautifulSoup is a Tag too
    raise TypeError(f'expected an HTML tree, got {type(obj).__name__}')


def _parse_lxml(html_text: str, fragment: bool, strict: bool) -> LxmlTree | None:
    '''lxml tree of the document, None if lxml would reject or rewrite parts of it'''
    with _LXML_LOCK, warnings.catch_warnings():
        warnings.simplefilter('error', DataLossWarning)  # html5lib renames/coerces instead of failing
        try: parsed = _html5lib_parse(html_text, 'lxml', strict, fragment)
        except (DataLossWarning, ValueError): return None  # ValueError: lxml refuses control characters
    if not fragment: return LxmlTree(parsed.getroot())

    root = ET.Element('body')  # html5lib hands a fragment back as [text, elements..., tail]
    for item in parsed:
        if isinstance(item, str): _add_text(root, len(root), item)
        else: root.append(item)
    return LxmlTree(root, fragment)

def _soup_fragment_root(soup: BeautifulSoup) -> Tag:
    '''<body> with everything html5lib moved in front of it (head content, whitespace) put back in place'''
    body = soup.body
    if body is None: return soup.html  # frameset documents have no body
    leading = []
    for child in list(soup.html.contents):
        if child is body: break
        leading.extend(list(child.contents) if child is soup.head else [child])
    for node in reversed(leading): body.insert(0, node)
    return body

def _html5lib_parse(html_text: str, treebuilder: str, strict: bool, fragment: bool = False):
    '''creates a correct working tree with html5lib'''
    parser = html5lib.HTMLParser(tree=html5lib.getTreeBuilder(treebuilder), strict=strict, namespaceHTMLElements=False)
    try:
        if fragment: return parser.parseFragment(html_text, container='body')
        return parser.parse(html_text)
    except _Html5libParseError as e: raise ParseError(str(e)) from e

def _get_tag(node: ET._Element) -> str:
    '''returns the tag of the node in lowercase (namespace dropped)'''
    if isinstance(node.tag, str): return ET.QName(node).localname.lower()
    else: return ''  # comment or processing instruction

def _add_text(parent: ET._Element, idx: int, text: str | None) -> None:
    '''appends text at position idx of parent (parent.text or tail of the previous sibling)'''
    if not text: return
    if idx == 0: parent.text = (parent.text or '') + text
    else:
        prev = parent[idx - 1]
        prev.tail = (prev.tail or '') + text
