"""
Generator modules for the Lojban password generator.

This package contains the random source and word generators:
- random_source: Secure uniform integer sampling
- lujvo: Compound word synthesis
- sentence: Sentence assembly with number, apostrophe and period policies
"""
