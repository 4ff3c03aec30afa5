SampleCase = tuple[str, float]

# Regression inputs with their exact expected values.
SAMPLE_CASES: list[SampleCase] = [
    ("0", 0),
    ("1", 1),
    ("9", 9),
    ("10", 10),
    ("+1", 1),
    ("-1", -1),
    ("(1)", 1),
    ("(-1)", -1),
    ("abs(-1)", 1),
    ("sin(0)", 0),
    ("cos(0)", 1),
    ("pow(2, 3)", 8),
    ("---1", -1),
    ("1+20", 21),
    ("1 + 20", 21),
    ("(1+20)", 21),
    ("-2*3", -6),
    ("2*-3", -6),
    ("1++2", 3),
    ("1+20+300", 321),
    ("1+20+300+4000", 4321),
    ("1+10*2", 21),
    ("10*2+1", 21),
    ("(1+20)*2", 42),
    ("2*(1+20)", 42),
    ("(1+2)*(3+4)", 21),
    ("2*3+4*5", 26),
    ("100+2*10+3", 123),
    ("2**3", 8),
    ("2**3*5+2", 42),
    ("5*2**3+2", 42),
    ("2+5*2**3", 42),
    ("1+2**3*10", 81),
    ("2**3+2*10", 28),
    ("5 * 4 + 3 * 2 + 1", 27),
]

# Grouping and operator quirks that must not drift.
SAMPLE_CASES += [
    ("2+3*4", 14),
    ("2*3+4", 10),
    ("10-3-2", 5),
    ("100-2*10+3", 83),
    ("2**3**2", 64),
    ("-+-1", 1),
    ("7 mod 2", 1),
    ("7.9 mod 2.9", 1),
]
