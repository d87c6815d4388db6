DEFAULT_PROMPT = "$ "
WRONG_ARGS = "wrong number of arguments"
# characters that end an unquoted word
BLANKS = frozenset(" \t\r\n\v\f")
# backslash escapes honored inside double quotes
DQUOTE_ESCAPES = frozenset('\\$"')
DEBUG_ENV = "PYSH_DEBUG"
