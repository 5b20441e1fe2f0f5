"""Closed label sets used on the factory floor."""

from enum import Enum


class Category(str, Enum):
    """Furniture line the slat is cut for."""

    CLOTHES = "Clothes"
    TROUSERS = "Trousers"
    PULL_OUT = "Pull Out"


class Color(str, Enum):
    WH = "WH"
    WSO = "WSO"
    GREY = "GREY"
    BEIGE = "BEIGE"


class ProductionStep(str, Enum):
    """Production stage a batch of slats was counted at."""

    AFTER_PILE = "After Pile"
    HOTSTAMPING = "Hotstamping"
    MILLING = "Milling"
    POST_WHEELS = "Post-wheels"
    FIRST_CYCLE = "First Cycle"


class PositionType(str, Enum):
    """Where the slat ends up in the assembled drawer."""

    FRONT = "Front"
    BACK = "Back"
    DEFAULT = "Default"
    SIDES = "Sides"
    LEFT = "Left"
    LEFT_HS = "Left-HS"
    RIGHT = "Right"
    RIGHT_HS = "Right-HS"
