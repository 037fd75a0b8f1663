from complexeval.parser.grammar import END_OF_EXPRESSION, evaluate
from complexeval.parser.tokenizer import tokenize

__all__ = ["END_OF_EXPRESSION", "evaluate", "tokenize"]
