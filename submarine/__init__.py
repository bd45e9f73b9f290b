"""Solvers for submarine-themed puzzles: scanners, images, dice, reactor, ALU, amphipods and sea cucumbers."""

__version__ = "0.1.0"