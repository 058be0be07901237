"""Defaults shared by the splitter and the command-line scripts."""

import os

DEFAULT_STRATEGY = "permutation"

# 8! = 40320 orderings; one more method multiplies the work by 9.
DEFAULT_MAX_METHODS = 8

DEFAULT_CONFIG_PATH = os.path.join("inputs", "config", "catalog.json")
DEFAULT_BASKET_PATH = os.path.join("inputs", "baskets", "basket.json")
DEFAULT_OUTDIR = "outputs"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
