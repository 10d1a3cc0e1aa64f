"""
Lingo: side-by-side translations with hover word lookup
"""
