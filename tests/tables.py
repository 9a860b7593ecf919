# S4 недостижимо, S0~S1 и S2~S3
MEALY_TEXT = (
    ";S0;S1;S2;S3;S4\n"
    "x;S1/y1;S0/y1;S3/y2;S2/y2;S0/y9\n"
    "z;S2/y2;S3/y2;S0/y1;S1/y1;S4/y9\n"
)

MEALY_MIN_TEXT = (
    ";S0;S2\n"
    "x;S0/y1;S2/y2\n"
    "z;S2/y2;S0/y1\n"
)

# Цепочка A -> B -> C -> D: без повторного уточнения A, B и C склеились бы
MEALY_CHAIN_TEXT = (
    ";A;B;C;D\n"
    "a;B/0;C/0;D/0;D/1\n"
)

# q4 недостижимо, q0~q2 и q1~q3
MOORE_TEXT = (
    ";y1;y2;y1;y2;y3\n"
    ";q0;q1;q2;q3;q4\n"
    "x;q1;q2;q3;q0;q4\n"
    "z;q2;q3;q0;q1;q0\n"
)

MOORE_MIN_TEXT = (
    ";y1;y2\n"
    ";q0;q1\n"
    "x;q1;q0\n"
    "z;q0;q1\n"
)

# S0 и S1 с одинаковым выходом различаются только через переход по x
MOORE_FIXPOINT_TEXT = (
    ";a;a;b\n"
    ";S0;S1;S2\n"
    "x;S1;S2;S2\n"
    "y;S0;S1;S2\n"
)
