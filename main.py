#!/usr/bin/env python3
"""
DNS Change Manager - Main Entry Point

This is the main entry point for the DNS Change Manager.
It can be run directly or imported as a module.
"""

from dns_change_manager.cli.main import main

if __name__ == "__main__":
    main()
