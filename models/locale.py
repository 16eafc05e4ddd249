"""Language and region codes accepted by the Maps web services."""
from models.codes import WireCode


class Language(WireCode):
    """Language in which results are returned, where available."""
    AFRIKAANS = "af"
    ALBANIAN = "sq"
    AMHARIC = "am"
    ARABIC = "ar"
    ARMENIAN = "hy"
    AZERBAIJANI = "az"
    BASQUE = "eu"
    BELARUSIAN = "be"
    BENGALI = "bn"
    BOSNIAN = "bs"
    BULGARIAN = "bg"
    BURMESE = "my"
    CATALAN = "ca"
    CHINESE = "zh"
    CHINESE_SIMPLIFIED = "zh-CN"
    CHINESE_HONG_KONG = "zh-HK"
    CHINESE_TRADITIONAL = "zh-TW"
    CROATIAN = "hr"
    CZECH = "cs"
    DANISH = "da"
    DUTCH = "nl"
    ENGLISH = "en"
    ENGLISH_AUSTRALIAN = "en-AU"
    ENGLISH_GREAT_BRITAIN = "en-GB"
    ESTONIAN = "et"
    FARSI = "fa"
    FINNISH = "fi"
    FILIPINO = "fil"
    FRENCH = "fr"
    FRENCH_CANADA = "fr-CA"
    GALICIAN = "gl"
    GEORGIAN = "ka"
    GERMAN = "de"
    GREEK = "el"
    GUJARATI = "gu"
    HEBREW = "iw"
    HINDI = "hi"
    HUNGARIAN = "hu"
    ICELANDIC = "is"
    INDONESIAN = "id"
    ITALIAN = "it"
    JAPANESE = "ja"
    KANNADA = "kn"
    KAZAKH = "kk"
    KHMER = "km"
    KOREAN = "ko"
    KYRGYZ = "ky"
    LAO = "lo"
    LATVIAN = "lv"
    LITHUANIAN = "lt"
    MACEDONIAN = "mk"
    MALAY = "ms"
    MALAYALAM = "ml"
    MARATHI = "mr"
    MONGOLIAN = "mn"
    NEPALI = "ne"
    NORWEGIAN = "no"
    POLISH = "pl"
    PORTUGUESE = "pt"
    PORTUGUESE_BRAZIL = "pt-BR"
    PORTUGUESE_PORTUGAL = "pt-PT"
    PUNJABI = "pa"
    ROMANIAN = "ro"
    RUSSIAN = "ru"
    SERBIAN = "sr"
    SINHALESE = "si"
    SLOVAK = "sk"
    SLOVENIAN = "sl"
    SPANISH = "es"
    SPANISH_LATIN_AMERICA = "es-419"
    SWAHILI = "sw"
    SWEDISH = "sv"
    TAMIL = "ta"
    TELUGU = "te"
    THAI = "th"
    TURKISH = "tr"
    UKRAINIAN = "uk"
    URDU = "ur"
    UZBEK = "uz"
    VIETNAMESE = "vi"
    ZULU = "zu"


class Region(WireCode):
    """Region bias, as a ccTLD ("top-level domain") two-character code.

    Most codes match ISO 3166-1, with notable exceptions such as "uk" for the
    United Kingdom.
    """
    ARGENTINA = "ar"
    AUSTRALIA = "au"
    AUSTRIA = "at"
    BELGIUM = "be"
    BRAZIL = "br"
    CANADA = "ca"
    CHILE = "cl"
    CHINA = "cn"
    COLOMBIA = "co"
    CZECH_REPUBLIC = "cz"
    DENMARK = "dk"
    EGYPT = "eg"
    FINLAND = "fi"
    FRANCE = "fr"
    GERMANY = "de"
    GREECE = "gr"
    HONG_KONG = "hk"
    HUNGARY = "hu"
    INDIA = "in"
    INDONESIA = "id"
    IRELAND = "ie"
    ISRAEL = "il"
    ITALY = "it"
    JAPAN = "jp"
    KENYA = "ke"
    MALAYSIA = "my"
    MEXICO = "mx"
    NETHERLANDS = "nl"
    NEW_ZEALAND = "nz"
    NIGERIA = "ng"
    NORWAY = "no"
    PERU = "pe"
    PHILIPPINES = "ph"
    POLAND = "pl"
    PORTUGAL = "pt"
    ROMANIA = "ro"
    SAUDI_ARABIA = "sa"
    SINGAPORE = "sg"
    SOUTH_AFRICA = "za"
    SOUTH_KOREA = "kr"
    SPAIN = "es"
    SWEDEN = "se"
    SWITZERLAND = "ch"
    TAIWAN = "tw"
    THAILAND = "th"
    TURKEY = "tr"
    UKRAINE = "ua"
    UNITED_ARAB_EMIRATES = "ae"
    UNITED_KINGDOM = "uk"
    UNITED_STATES = "us"
    VIETNAM = "vn"
