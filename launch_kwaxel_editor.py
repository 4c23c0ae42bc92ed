#!/usr/bin/env python3
"""Convenience launcher for the Kwaxel editor from root directory"""

from kwaxel_editor.core.kwaxel_editor_window import main

if __name__ == "__main__":
    main()
