def test_can_import_all_protocols():
    # Import must succeed and expose the expected names
    import concacti.core.interfaces as I

    assert hasattr(I, "ConcatEngineProtocol")
    assert hasattr(I, "EngineRunnerProtocol")
    assert hasattr(I, "LoggerFactoryProtocol")
    assert hasattr(I, "LoggerLikeProtocol")
    assert hasattr(I, "MatcherFactoryProtocol")
    assert hasattr(I, "PathFilterProtocol")
    assert hasattr(I, "TreeRendererProtocol")
    assert hasattr(I, "WalkerProtocol")


def test_default_collaborators_satisfy_protocols():
    import logging

    import concacti.core.interfaces as I
    from concacti import DirectoryTreeRenderer, DirectoryWalker, EngineRunner, build_engine, build_patterns
    from concacti.logging.factory import DefaultLoggerFactory

    assert isinstance(DirectoryWalker(), I.WalkerProtocol)
    assert isinstance(DirectoryTreeRenderer(), I.TreeRendererProtocol)
    assert isinstance(build_patterns([]), I.PathFilterProtocol)
    assert isinstance(build_patterns, I.MatcherFactoryProtocol)
    assert I.ConcatEngineProtocol in type(build_engine()).__mro__
    assert I.EngineRunnerProtocol in EngineRunner.__mro__
    assert isinstance(DefaultLoggerFactory(), I.LoggerFactoryProtocol)
    assert isinstance(logging.getLogger("concacti"), I.LoggerLikeProtocol)
