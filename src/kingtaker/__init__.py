"""kingtaker: an 8×8 capture-the-king board game with a negamax opponent."""

__version__ = "0.1.0"
