"""
Key-value storage backends and the skill store built on them.
"""
