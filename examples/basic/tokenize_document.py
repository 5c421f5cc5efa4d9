"""Tokenize an Org document and print its item stream — zero config, zero deps."""

from orgtok import tokenize

for item in tokenize("* Hello /World/\n- item :: [[https://orgmode.org][Org]]\n"):
    print(item)
