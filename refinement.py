"""
Минимизация по Муру: разбиение состояний на классы эквивалентности.

Разбиение хранится как номер класса для каждого состояния. Номера выдаются
в порядке первого появления сигнатуры при проходе по состояниям в
каноническом порядке, поэтому результат не зависит от порядка обхода
словарей и повторяется от запуска к запуску.
"""


class Partition:
    def __init__(self, states, class_of, rounds=0):
        self.states = list(states)
        self.class_of = dict(class_of)
        self.rounds = rounds

    def __len__(self):
        return len(set(self.class_of.values()))

    def blocks(self):
        """Список классов (списков состояний) в порядке номеров классов."""
        blocks = [[] for _ in range(len(self))]
        for s in self.states:
            blocks[self.class_of[s]].append(s)
        return blocks

    def same_class(self, a, b):
        return self.class_of[a] == self.class_of[b]

    def __repr__(self):
        return f"Partition({self.blocks()!r}, rounds={self.rounds})"


def group_by(states, key):
    # Сигнатура -> номер класса, номера выдаются по порядку появления
    ids = {}
    class_of = {}
    for s in states:
        class_of[s] = ids.setdefault(key(s), len(ids))
    return class_of


def initial_partition(states, signature):
    """Первичное разбиение: состояния с одинаковыми выходами попадают в один класс."""
    return group_by(states, signature)


def refine_step(states, inputs, next_state, class_of):
    """
    Один шаг уточнения разбиения.

    Расширенная сигнатура состояния – его текущий класс и классы состояний,
    в которые оно переходит по каждому входу. Текущий класс входит в сигнатуру,
    поэтому уже разделённые состояния снова не объединяются.
    """
    def extended(s):
        return (class_of[s], tuple(class_of[next_state(s, a)] for a in inputs))
    return group_by(states, extended)


def refine(states, inputs, next_state, signature):
    """
    Строит разбиение, в котором два состояния в одном классе тогда и только
    тогда, когда на любую входную последовательность они выдают одинаковый выход.

      states     - состояния в каноническом порядке
      inputs     - входные символы
      next_state - функция (состояние, вход) -> следующее состояние
      signature  - функция состояние -> выходы, видимые без переходов
    """
    states = list(states)
    class_of = initial_partition(states, signature)
    count = len(set(class_of.values()))
    rounds = 0
    # Число классов растёт при каждом изменении и не больше числа состояний
    while count < len(states):
        new_class_of = refine_step(states, inputs, next_state, class_of)
        new_count = len(set(new_class_of.values()))
        if new_count == count:
            break
        class_of, count = new_class_of, new_count
        rounds += 1
    return Partition(states, class_of, rounds)


def refine_automaton(machine):
    return refine(machine.states, machine.inputs, machine.next_state, machine.signature)
