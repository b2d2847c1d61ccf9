"""
Text Functions — Текстовые, URI и JSON операции стандартной библиотеки

Прямые ссылки на builtins / urllib.parse / json. Ошибки (например,
json.JSONDecodeError для некорректного JSON) пробрасываются без изменений.
"""

import json
from functools import partial
from typing import Final
from urllib.parse import quote, unquote

# Зарезервированные символы URI, которые не экранируются при кодировании
# целого URI (буквы, цифры и "-_.~" quote не трогает всегда)
URI_RESERVED_CHARACTERS: Final[str] = ";,/?:@&=+$!*'()#"


# =============================================================================
# ТЕКСТ
# =============================================================================

get_text = str

get_lower_text = str.lower

get_upper_text = str.upper

# Регистронезависимая форма для сравнения строк
get_folded_text = str.casefold


# =============================================================================
# URI
# =============================================================================

get_encoded_uri = partial(quote, safe=URI_RESERVED_CHARACTERS)

get_decoded_uri = unquote


# =============================================================================
# JSON
# =============================================================================

get_json_text = json.dumps

get_json_object = json.loads
