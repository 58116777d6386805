import re
import unicodedata

__all__ = ('low_cam', 'up_cam', 'safe_identifier', 'RESERVED_WORDS')

# Keywords of the generated Elm modules.
RESERVED_WORDS = frozenset(
    {
        'alias',
        'as',
        'case',
        'effect',
        'else',
        'exposing',
        'if',
        'import',
        'in',
        'infix',
        'let',
        'module',
        'of',
        'port',
        'then',
        'type',
        'where',
    }
)


def low_cam(name: str) -> str:
    if not name:
        return ''
    return name[0].lower() + name[1:]


def up_cam(name: str) -> str:
    if not name:
        return ''
    return name[0].upper() + name[1:]


def remove_accents(input_str):
    nfkd_form = unicodedata.normalize('NFKD', input_str)
    return ''.join(c for c in nfkd_form if not unicodedata.combining(c))


def safe_identifier(name: str, capitalize: bool | None = None) -> str:
    """Convert a string into an identifier that is legal in generated code.

    - Replace every run of invalid characters with an underscore
    - Strip leading and trailing underscores
    - Ensure it doesn't start with a digit
    - Apply the requested casing to the first letter
    - Suffix reserved words with an underscore

    With ``capitalize`` left as None the letter case is untouched. Pass True
    for union variants, which must start upper case, and False for record
    fields, which must start lower case.
    """
    sanitized = re.sub(r'[^A-Za-z0-9_]+', '_', remove_accents(name or ''))
    sanitized = sanitized.strip('_')

    if not sanitized:
        sanitized = 'Unnamed'

    if sanitized[0].isdigit():
        sanitized = 'N' + sanitized

    if capitalize is True:
        sanitized = up_cam(sanitized)
    elif capitalize is False:
        sanitized = low_cam(sanitized)

    if sanitized in RESERVED_WORDS:
        return f'{sanitized}_'
    return sanitized
