"""ANSI output, logging, randomness, time, identifiers and terminal helpers."""