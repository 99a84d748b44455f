def pytest_configure(config):
    config.addinivalue_line("markers", "performance: lexer throughput benchmarks")
