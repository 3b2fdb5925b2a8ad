"""What second-look measures against — the heuristics and where to look."""

SKIP_DIRS = {".git", "__pycache__", ".venv", "venv", "node_modules", ".tox", ".mypy_cache", "build", "dist"}

# Assembled so this file never carries the vetting mark itself.
VETTED_MARK = "sl:" + "vetted"
IGNORE_MARK = "sl:" + "ignore"

# Built-in thresholds. pyproject.toml and CLI flags override these.
DEFAULTS = {
    "max_depth": 3,
    "max_statements": 30,
    "max_branches": 10,
    "min_name_length": 3,
    "dup_min_nodes": 40,
    "dup_min_lines": 5,
}

# Printed at the top of every scan so the reader knows what the code is
# being measured against. No secret rules.
HEURISTICS = [
    "Don't repeat yourself: no structurally identical blocks",
    "One level of abstraction per function: shallow, short, few branches",
    "Names say what they hold: no cryptic, numbered or abbreviated names",
]

# Conventional short names that read fine in context.
ALLOWED_SHORT_NAMES = frozenset({
    "i", "j", "k", "n", "x", "y", "z", "e", "f", "id", "db", "df", "fp",
    "ok", "io", "os", "ui", "ip", "pk", "op", "fn", "np", "pd", "re", "to",
    "at", "by", "up", "on", "is", "as", "of", "no",
})

# Trailing words where the digits are part of the meaning, not a counter.
NUMERIC_WORDS = frozenset({
    "md5", "sha1", "sha224", "sha256", "sha384", "sha512", "utf8", "utf16",
    "base32", "base64", "base85", "int8", "int16", "int32", "int64",
    "uint8", "uint16", "uint32", "uint64", "float16", "float32", "float64",
    "ipv4", "ipv6", "http2", "oauth2", "s3", "ec2", "x2", "x3", "2d", "3d",
    "py2", "py3", "log2", "log10", "l1", "l2", "h1", "h2", "h3", "v1", "v2",
})

ABBREVIATIONS = frozenset({
    "acc", "addr", "arr", "btn", "buf", "calc", "cb", "cfg", "cmd", "cnt",
    "conf", "ctx", "cur", "curr", "dst", "el", "elem", "err", "evt", "fmt",
    "hdr", "idx", "img", "itm", "lst", "mgr", "msg", "num", "obj", "pkt",
    "prev", "proc", "ptr", "qty", "recv", "req", "res", "resp", "ret",
    "seq", "src", "srv", "svc", "tmp", "tx", "usr", "val", "vec", "wnd",
})

# Vowel-less words that are real words in code.
ACRONYMS = frozenset({
    "css", "csv", "cwd", "dns", "html", "http", "js", "jwt", "md", "pdf",
    "png", "pwd", "rgb", "rpc", "sql", "ssh", "ssl", "svg", "tcp", "tls",
    "udp", "xml", "xhr", "www",
})

VOWELS = frozenset("aeiouy")
