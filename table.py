import csv
import io

from automaton import MealyAutomaton, MooreAutomaton
from errors import AutomatonIOError, FormatError

DELIMITER = ';'

# Кавычек в таблице нет: ячейки разделяются только ";", кавычка – обычный символ имени
CSV_FORMAT = {'quoting': csv.QUOTE_NONE, 'quotechar': None}


# Чтение таблицы: список пар (номер строки, ячейки), пустые строки пропускаются
def read_rows(text, delimiter=DELIMITER):
    reader = csv.reader(io.StringIO(text), delimiter=delimiter, **CSV_FORMAT)
    rows = []
    try:
        for row in reader:
            cells = [cell.strip() for cell in row]
            # хвостовые ";" в конце строки ничего не значат
            while cells and not cells[-1]:
                cells.pop()
            if cells:
                rows.append((reader.line_num, cells))
    except csv.Error as e:
        raise FormatError(str(e), reader.line_num) from e
    return rows


def write_rows(rows, delimiter=DELIMITER):
    buffer = io.StringIO()
    writer = csv.writer(buffer, delimiter=delimiter, lineterminator='\n', **CSV_FORMAT)
    writer.writerows(rows)
    return buffer.getvalue()


def read_text(path):
    try:
        with open(path, 'r', newline='', encoding='utf-8') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise AutomatonIOError(f"не удалось прочитать входной файл ({e})", path) from e


def write_text(path, text):
    try:
        with open(path, 'w', newline='', encoding='utf-8') as f:
            f.write(text)
    except OSError as e:
        raise AutomatonIOError(f"не удалось записать выходной файл ({e})", path) from e


def sniff_flavor(text):
    """
    Угадывает тип автомата по таблице.
    Если во второй строке первая ячейка пустая – это автомат Мура.
    """
    rows = read_rows(text)
    if len(rows) >= 2 and rows[1][1][0] == "":
        return 'moore'
    return 'mealy'


def _parse_header(line, cells, what):
    if cells[0]:
        raise FormatError(f"строка {what} должна начинаться с пустой ячейки", line)
    labels = cells[1:]
    if not labels:
        raise FormatError(f"строка {what} пуста", line)
    for i, label in enumerate(labels):
        if not label:
            raise FormatError(f"пустое имя в строке {what}, столбец {i + 1}", line)
    return labels


def _parse_states(line, cells):
    states = _parse_header(line, cells, "состояний")
    seen = set()
    for s in states:
        if s in seen:
            raise FormatError(f"повторяется состояние {s}", line)
        seen.add(s)
    return states


def _iter_transition_rows(rows, states):
    # Каждая строка: входной символ, затем по одной ячейке на состояние
    seen = set()
    for line, cells in rows:
        symbol = cells[0]
        if not symbol:
            raise FormatError("нет входного символа", line)
        if symbol in seen:
            raise FormatError(f"повторяется входной символ {symbol}", line)
        seen.add(symbol)
        row = cells[1:]
        if len(row) != len(states):
            raise FormatError(
                f"для входа {symbol} задано переходов: {len(row)}, ожидалось {len(states)}", line)
        for state, cell in zip(states, row):
            if not cell:
                raise FormatError(f"пустой переход из состояния {state} по входу {symbol}", line)
        yield line, symbol, row


def _check_target(target, states, line):
    if target not in states:
        raise FormatError(f"переход в необъявленное состояние {target}", line)


def decode_mealy(text):
    rows = read_rows(text)
    if not rows:
        raise FormatError("нет строки заголовка")
    line, header = rows[0]
    states = _parse_states(line, header)
    declared = set(states)
    inputs = []
    transitions = {s: {} for s in states}
    outputs = {s: {} for s in states}
    for line, symbol, row in _iter_transition_rows(rows[1:], states):
        inputs.append(symbol)
        for src, cell in zip(states, row):
            if '/' not in cell:
                raise FormatError(f"в ячейке перехода {cell!r} нет разделителя '/'", line)
            target, out = cell.split('/', 1)
            target = target.strip()
            _check_target(target, declared, line)
            transitions[src][symbol] = target
            outputs[src][symbol] = out.strip()
    return MealyAutomaton(states, inputs, transitions, outputs)


def decode_moore(text):
    rows = read_rows(text)
    if len(rows) < 2:
        raise FormatError("в таблице Мура нужны строка выходов и строка состояний")
    out_line, out_cells = rows[0]
    line, header = rows[1]
    output_row = _parse_header(out_line, out_cells, "выходов")
    states = _parse_states(line, header)
    if len(output_row) != len(states):
        raise FormatError(f"выходов: {len(output_row)}, состояний: {len(states)}", out_line)
    declared = set(states)
    outputs = dict(zip(states, output_row))
    inputs = []
    transitions = {s: {} for s in states}
    for line, symbol, row in _iter_transition_rows(rows[2:], states):
        inputs.append(symbol)
        for src, target in zip(states, row):
            _check_target(target, declared, line)
            transitions[src][symbol] = target
    return MooreAutomaton(states, inputs, transitions, outputs)


def export_mealy(mealy):
    rows = [[''] + mealy.states]
    for a in mealy.inputs:
        row = [a]
        for st in mealy.states:
            target, out = mealy.transition(st, a)
            row.append(f"{target}/{out}")
        rows.append(row)
    return rows


def export_moore(moore):
    rows = [[''] + [moore.outputs[st] for st in moore.states], [''] + moore.states]
    for a in moore.inputs:
        rows.append([a] + [moore.next_state(st, a) for st in moore.states])
    return rows


def encode_mealy(mealy):
    return write_rows(export_mealy(mealy))


def encode_moore(moore):
    return write_rows(export_moore(moore))


DECODERS = {'mealy': decode_mealy, 'moore': decode_moore}
ENCODERS = {'mealy': encode_mealy, 'moore': encode_moore}


def decode(flavor, text):
    return DECODERS[flavor](text)


def encode(machine):
    return ENCODERS[machine.flavor](machine)


def load(flavor, path):
    return decode(flavor, read_text(path))


def save(machine, path):
    write_text(path, encode(machine))
