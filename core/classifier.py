"""
classifier.py — Placeholder Animal Classification
--------------------------------------------------

Assigns an animal label to an uploaded photo without running a model.

The label is picked from the first letter of the file name so that field
demos are repeatable:

    B → Buffalo, Z → Zebra, R → Rhino, E → Elephant, anything else → Unknown

The confidence is drawn uniformly from 92–100 %. Both are combined into the
label stored on the report, e.g. ``"Zebra (95%)"``.

Swap `analyze_animal_image` for a real detector
once one is available for the reporting app.
"""

import logging
import random
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from config.settings import ANALYSIS_DELAY_SECONDS

logger = logging.getLogger(__name__)

ANIMALS_BY_INITIAL = {
    "B": "Buffalo",
    "Z": "Zebra",
    "R": "Rhino",
    "E": "Elephant",
}

UNKNOWN_ANIMAL = "Unknown"
MIN_CONFIDENCE = 92
MAX_CONFIDENCE = 100


@dataclass(frozen=True)
class AnimalAnalysis:
    animal_type: str
    confidence: int

    @property
    def label(self) -> str:
        return f"{self.animal_type} ({self.confidence}%)"


def animal_for_filename(filename: str) -> str:
    name = Path(filename or "").name
    if not name:
        return UNKNOWN_ANIMAL
    return ANIMALS_BY_INITIAL.get(name[0].upper(), UNKNOWN_ANIMAL)


def analyze_animal_image(filename: str, rng: Optional[random.Random] = None,
                         delay: float = ANALYSIS_DELAY_SECONDS) -> AnimalAnalysis:
    """
    Classify a captured image by its file name.

    Args:
        filename (str): Original upload name, e.g. "zebra_0412.jpg"
        rng (random.Random): Optional seeded generator for the confidence draw
        delay (float): Seconds to wait, simulating model latency

    Returns:
        AnimalAnalysis: animal type plus integer confidence in [92, 100]
    """
    rng = rng or random
    animal_type = animal_for_filename(filename)
    confidence = rng.randint(MIN_CONFIDENCE, MAX_CONFIDENCE)

    if delay > 0:
        time.sleep(delay)

    analysis = AnimalAnalysis(animal_type=animal_type, confidence=confidence)
    logger.info("Classified %s as %s", filename, analysis.label)
    return analysis
