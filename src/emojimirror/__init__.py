"""emojimirror - facial blendshapes to emoji expressions.

Classifies a face into one of neutral, smile, surprise, frown or cheeky
from per-frame blendshape scores, optionally relative to a calibrated
rest-face baseline.

Quick Start:
    >>> from emojimirror import BaselineStore, ExpressionClassifier, glyph_for
    >>> store = BaselineStore()
    >>> classifier = ExpressionClassifier()
    >>> store.calibrate({"mouthSmileLeft": 0.05})
    >>> category = classifier.classify({"mouthSmileLeft": 0.6}, store)
    >>> print(category.value, glyph_for(category))
    smile 🙂
"""

from emojimirror.types import BlendshapeVector, ExpressionCategory
from emojimirror.blendshapes import blend_map, channel, delta
from emojimirror.baseline import BaselineStore
from emojimirror.config import ClassifierConfig
from emojimirror.classifier import ExpressionClassifier, ScoringRule, classify
from emojimirror.glyphs import EMOJI_SET, glyph_for
from emojimirror.persistence import save_baseline, load_baseline
from emojimirror.observation import Observation
from emojimirror.output import EmojiOutput
from emojimirror.analyzer import EmojiExpressionAnalyzer

__all__ = [
    "BlendshapeVector",
    "ExpressionCategory",
    "blend_map",
    "channel",
    "delta",
    "BaselineStore",
    "ClassifierConfig",
    "ExpressionClassifier",
    "ScoringRule",
    "classify",
    "EMOJI_SET",
    "glyph_for",
    "save_baseline",
    "load_baseline",
    "Observation",
    "EmojiOutput",
    "EmojiExpressionAnalyzer",
]
