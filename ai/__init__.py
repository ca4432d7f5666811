"""
ai/ - Generative AI
===================
Gemini prompts that turn transaction history into spending commentary.
"""
