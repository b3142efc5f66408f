# -*- coding: utf-8 -*-
"""Access Console user interface."""
