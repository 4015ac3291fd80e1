"""
Ascending Alphabet - find the letter ordering with the most ascending words.
"""
