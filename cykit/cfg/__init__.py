from .symbol import Symbol, Terminal, Nonterminal, Epsilon
from .rule import CNFProduction, RuleKind
from .cfg import CNF
from .cyk import CYK, accepts
from .errors import GrammarError, DuplicateDeclarationError, UndeclaredLhsError, MalformedRuleError
from .errors import UnrecognizedSymbolError
from .ply_cfg import read_grammar
