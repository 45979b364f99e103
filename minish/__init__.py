"""Building blocks of a command shell: syntax checks, expansion, tokenizing, PATH lookup and output redirection."""

__version__ = "0.1.0"