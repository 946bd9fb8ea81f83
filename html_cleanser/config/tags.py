# --- QUICK-ADD TAGS ---------------------------------------------------------
# Tags offered for quick selection, in the order they are offered
COMMON_TAGS = [
    "a",           # links, e.g. <a href="...">Click</a> -> "Click"
    "script",      # JS code, e.g. <script>...</script>
    "iframe",      # embedded pages (YouTube, ads, widgets)
    "div",         # generic layout container
    "span",        # generic inline wrapper
    "img",         # images, no inner content
    "style",       # CSS rules, e.g. <style>...</style>
]

# --- ELEMENT VOCABULARY -----------------------------------------------------
# Known element names; anything else is reported as unknown (still stripped if present)
HTML_TAGS = {
    # Document structure & metadata
    "html", "head", "body", "title", "base", "link", "meta", "style",

    # Scripting
    "script", "noscript", "template", "slot", "canvas",

    # Sectioning
    "article", "section", "nav", "aside", "header", "footer", "main", "address",
    "h1", "h2", "h3", "h4", "h5", "h6", "hgroup", "search",

    # Grouping content
    "p", "hr", "pre", "blockquote", "ol", "ul", "menu", "li",
    "dl", "dt", "dd", "figure", "figcaption", "div",

    # Text-level semantics
    "a", "em", "strong", "small", "s", "cite", "q", "dfn", "abbr",
    "ruby", "rt", "rp", "data", "time", "code", "var", "samp", "kbd",
    "sub", "sup", "i", "b", "u", "mark", "bdi", "bdo", "span", "br", "wbr",

    # Edits
    "ins", "del",

    # Embedded content
    "picture", "source", "img", "iframe", "embed", "object", "video",
    "audio", "track", "map", "area", "svg", "math",

    # Tables
    "table", "caption", "colgroup", "col", "tbody", "thead", "tfoot",
    "tr", "td", "th",

    # Forms
    "form", "label", "input", "button", "select", "datalist", "optgroup",
    "option", "textarea", "output", "progress", "meter", "fieldset", "legend",

    # Interactive
    "details", "summary", "dialog",

    # old (still parsed by browsers)
    "center", "font", "marquee", "frame", "frameset", "noframes", "big", "tt",
    "strike", "acronym", "applet", "basefont", "dir", "nobr",
}
