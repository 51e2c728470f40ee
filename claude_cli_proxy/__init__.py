"""
Claude CLI Proxy: translates OpenAI-style chat requests into Claude CLI input.
"""

__version__ = "0.1.0"
