from .base import MentionMatcher
from .bare_name_matcher import BareNameMatcher
from .extractor import EntityExtractor
from .identified_name_matcher import IdentifiedNameMatcher

__all__ = ["BareNameMatcher", "EntityExtractor", "IdentifiedNameMatcher", "MentionMatcher"]
