#!/usr/bin/env python
"""
Run a few sample conversions and log the results.

Usage:
    python scripts/run_demo.py
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from unitconverter import Category, celsius, convert, meters, pounds

logger = logging.getLogger(__name__)


def main():
    result = meters(5.0).convert_to("feet")
    if result.success:
        logger.info("5 meters = %d feet", round(result.value))  # ~16 feet

    result = celsius(25.0).convert_to("fahrenheit")
    if result.success:
        logger.info("25 °C = %d °F", round(result.value))  # 77 °F

    result = pounds(50.0).convert_to("kilograms")
    if result.success:
        logger.info("50 pounds = %.4f kilograms", result.value)

    result = convert(10.0, "meters", "kilograms", Category.LENGTH)
    if not result.success:
        logger.warning("%s", result.message)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
