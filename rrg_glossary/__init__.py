from rrg_glossary.classify import ClassifiedFragment, TextFragment, classify  # noqa: F401
from rrg_glossary.glossary import Glossary, build_glossary  # noqa: F401
from rrg_glossary.normalize import normalize_string  # noqa: F401
