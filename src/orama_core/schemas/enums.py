"""Vocabulary the service understands for collection configuration."""

from enum import Enum


class Language(str, Enum):
    """Languages supported by the service tokenizer."""

    ARABIC = "arabic"
    BULGARIAN = "bulgarian"
    CHINESE = "chinese"
    DANISH = "danish"
    DUTCH = "dutch"
    GERMAN = "german"
    GREEK = "greek"
    ENGLISH = "english"
    ESTONIAN = "estonian"
    SPANISH = "spanish"
    FINNISH = "finnish"
    FRENCH = "french"
    IRISH = "irish"
    HINDI = "hindi"
    HUNGARIAN = "hungarian"
    ARMENIAN = "armenian"
    INDONESIAN = "indonesian"
    ITALIAN = "italian"
    JAPANESE = "japanese"
    KOREAN = "korean"
    LITHUANIAN = "lituanian"  # wire value is spelled this way
    NEPALI = "nepali"
    NORWEGIAN = "norwegian"
    PORTUGUESE = "portuguese"
    ROMANIAN = "romanian"
    RUSSIAN = "russian"
    SANSKRIT = "sanskrit"
    SLOVENIAN = "slovenian"
    SERBIAN = "serbian"
    SWEDISH = "swedish"
    TAMIL = "tamil"
    TURKISH = "turkish"
    UKRAINIAN = "ukrainian"


DEFAULT_LANGUAGE = Language.ENGLISH


class EmbeddingModel(str, Enum):
    """Embedding backends available for Complex/Embedding fields."""

    E5_MULTILINGUAL_SMALL = "E5MultilangualSmall"
    E5_MULTILINGUAL_BASE = "E5MultilangualBase"
    E5_MULTILINGUAL_LARGE = "E5MultilangualLarge"
    BGE_SMALL = "BGESmall"
    BGE_BASE = "BGEBase"
    BGE_LARGE = "BGELarge"
