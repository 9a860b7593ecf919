import table
from builder import build_minimized
from reachability import remove_unreachable
from refinement import refine_automaton

FLAVORS = ('mealy', 'moore')


# Удаление недостижимых состояний, уточнение разбиения, сборка нового автомата
def minimize(machine, rename=None):
    remove_unreachable(machine)
    partition = refine_automaton(machine)
    return build_minimized(machine, partition, rename)


def minimize_text(flavor, text, rename=None):
    return table.encode(minimize(table.decode(flavor, text), rename))


def minimize_mealy(text, rename=None):
    return minimize_text('mealy', text, rename)


def minimize_moore(text, rename=None):
    return minimize_text('moore', text, rename)


def minimize_file(flavor, input_file, output_file, rename=None, text=None):
    """
    Читает автомат из файла (или из уже прочитанного text), минимизирует его
    и записывает результат. Возвращает пару (исходное число состояний, новый автомат).
    """
    if text is None:
        text = table.read_text(input_file)
    machine = table.decode(flavor, text)
    original_size = len(machine)
    minimized = minimize(machine, rename)
    # Текст готов до открытия выходного файла
    table.save(minimized, output_file)
    return original_size, minimized
