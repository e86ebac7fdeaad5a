#!/usr/bin/env python3
"""paraedit - A line-mode paragraph editor.

Usage:
    python main.py

Commands:
    add [index]         Insert a paragraph (prompts for its text)
    dummy [index]       Insert a placeholder paragraph
    del [index]         Delete a paragraph (the last one by default)
    replace [index]     Replace text in a paragraph (the last one by default)
    print               Show the document
    index               List words occurring in more than 3 paragraphs
    format raw          Print paragraphs verbatim
    format fix <width>  Print paragraphs wrapped at <width> columns
    help                List commands
    exit                Quit
"""

from paraedit.__main__ import main


if __name__ == "__main__":
    main()
