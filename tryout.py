from deskcalc.errors import ErrorReporter
from deskcalc.runtime import Session
from deskcalc.tokenizer import tokenize

for code in [
    "5",
    "-1",
    "1 + 1",
    "-1 + 1",
    "1 + -1",
    "4 + 6 * 3",
    "(4 + 6)",
    "(4+6) * 3",
    "80225/-2",
    "7/6/2000",
    "a = 1; b= 2; c = a + b",
    "var = (1 + 14 * (54*54))",
    "10 / 5/ 2",
    "a = b = 10",
    "2 * pi * r",
    "1 / 0",
    "2 +",
    "(1 + 2",
    "3 $ 4",
]:
    print("=" * 10)
    print(f"code: {code!r}")

    tokens = tokenize(code, ErrorReporter(sink=lambda text: None))
    print(f"tokens: {' '.join(str(t) for t in tokens)}")

    diagnostics: list[str] = []
    session = Session(reporter=ErrorReporter(sink=diagnostics.append))
    results = session.evaluate(code)
    results_str = "\n".join(f" {i + 1:> 2}: {res}" for i, res in enumerate(results))
    print(f"statement results:\n{results_str}")
    if diagnostics:
        print("errors:\n" + "\n".join(f"  {d}" for d in diagnostics))
    print(f"error count: {session.errors}")
    print(f"variables: {session.symbols.as_dict()}")
