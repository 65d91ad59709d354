"""
Tidy greenhouse-gas emissions tables, one wrangling step at a time.

"""
