#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Entry point script for printing the Vercel env setup commands.
"""

from vercel_env_setup.cli import main


if __name__ == "__main__":
    main()
