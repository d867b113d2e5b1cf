"""
zimu - merge two subtitle files into one bilingual ASS file
"""
__version__ = "0.1.0"
