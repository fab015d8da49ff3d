# Versor: Universal Geometric Algebra Neural Network
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want
# the industry to build upon this "unbending" paradigm.

"""Rotate a vector in a plane and report the result.

    python demo.py                      # e_x by 45 degrees in the xy-plane
    python demo.py angle_deg=90 plane=[0,1,0]
"""

import math

import hydra
from omegaconf import DictConfig

from ga3 import EvenElement, OddElement, from_bivector_angle
from log import get_logger

logger = get_logger(__name__)


def rotate(cfg: DictConfig) -> OddElement:
    """Builds the configured rotor and applies it to the configured vector."""
    vector = OddElement.from_vector(*cfg.vector)
    plane = EvenElement.from_bivector(*cfg.plane)
    rotor = from_bivector_angle(plane, math.radians(cfg.angle_deg))
    logger.debug("rotor: %s (mag2=%s)", rotor, rotor.mag2())
    return rotor.sandwich(vector)


@hydra.main(version_base=None, config_path="conf", config_name="demo")
def main(cfg: DictConfig):
    result = rotate(cfg)
    logger.info("%s", result)


if __name__ == "__main__":
    main()
