from concacti.matching.path_matcher import PatternSet, build

__all__ = ['PatternSet', 'build']
