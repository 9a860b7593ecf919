from errors import FormatError, InvariantError


class Automaton:
    """
    Детерминированный автомат-преобразователь с полной функцией переходов.

    Общая часть автоматов Мили и Мура:
      states      - список состояний; порядок задаёт порядок столбцов таблицы,
                    первое состояние – начальное
      inputs      - список входных символов (порядок строк таблицы)
      transitions - словарь: состояние -> { входной символ -> следующее состояние }

    Где хранится выход, решают подклассы. Алгоритмы минимизации обращаются
    к выходу только через signature() и project().
    """

    flavor = None

    def __init__(self, states, inputs, transitions):
        self.states = list(states)
        self.inputs = list(inputs)
        self.transitions = {s: dict(transitions.get(s, {})) for s in self.states}
        self._validate()

    @property
    def start(self):
        return self.states[0]

    def __len__(self):
        return len(self.states)

    def __contains__(self, state):
        return state in self.transitions

    def _validate(self):
        if not self.states:
            raise InvariantError("в автомате нет состояний")
        if len(set(self.states)) != len(self.states):
            raise InvariantError("в автомате повторяются состояния")
        if not self.inputs:
            raise FormatError("в автомате нет входных символов")
        for s in self.states:
            row = self.transitions[s]
            for a in self.inputs:
                if a not in row:
                    raise FormatError(f"у состояния {s} нет перехода по входу {a}")
                if row[a] not in self.transitions:
                    raise FormatError(f"переход {s} --{a}--> {row[a]} ведёт в необъявленное состояние")

    def next_state(self, state, symbol):
        return self.transitions[state][symbol]

    def output(self, state, symbol):
        raise NotImplementedError

    def transition(self, state, symbol):
        return self.next_state(state, symbol), self.output(state, symbol)

    def signature(self, state):
        """Выходы, которые видны из состояния без единого перехода."""
        raise NotImplementedError

    def remove_states(self, doomed):
        doomed = set(doomed)
        if self.start in doomed:
            raise InvariantError(f"нельзя удалить начальное состояние {self.start}")
        self.states = [s for s in self.states if s not in doomed]
        for s in doomed:
            self.transitions.pop(s, None)
        self._drop_outputs(doomed)
        for s in self.states:
            row = self.transitions[s]
            for a in self.inputs:
                if row.get(a) in doomed:
                    raise InvariantError(f"состояние {s} потеряло переход по входу {a}")

    def _drop_outputs(self, doomed):
        raise NotImplementedError

    def project(self, representatives, mapping):
        """
        Строит новый автомат над представителями классов.

        representatives - словарь: новое имя -> исходное состояние-представитель
                          (порядок ключей задаёт порядок состояний)
        mapping         - словарь: исходное состояние -> новое имя
        """
        raise NotImplementedError

    def run(self, word, state=None):
        """
        Подаёт на вход последовательность символов (по умолчанию из начального
        состояния), возвращает список выходов.
        """
        if state is None:
            state = self.start
        result = []
        for a in word:
            state, out = self.step(state, a)
            result.append(out)
        return result

    def step(self, state, symbol):
        raise NotImplementedError

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return (self.states == other.states and self.inputs == other.inputs
                and self.transitions == other.transitions and self.outputs == other.outputs)

    def __repr__(self):
        return f"{type(self).__name__}(states={self.states!r}, inputs={self.inputs!r})"


class MealyAutomaton(Automaton):
    """outputs[state][input] – выход на переходе."""

    flavor = "mealy"

    def __init__(self, states, inputs, transitions, outputs):
        self.outputs = {s: dict(row) for s, row in outputs.items()}
        super().__init__(states, inputs, transitions)

    def _validate(self):
        super()._validate()
        for s in self.states:
            row = self.outputs.get(s, {})
            for a in self.inputs:
                if a not in row:
                    raise FormatError(f"у состояния {s} нет выхода по входу {a}")

    def output(self, state, symbol):
        return self.outputs[state][symbol]

    def signature(self, state):
        return tuple(self.outputs[state][a] for a in self.inputs)

    def step(self, state, symbol):
        return self.transition(state, symbol)

    def _drop_outputs(self, doomed):
        for s in doomed:
            self.outputs.pop(s, None)

    def project(self, representatives, mapping):
        transitions = {}
        outputs = {}
        for name, rep in representatives.items():
            transitions[name] = {a: mapping[self.next_state(rep, a)] for a in self.inputs}
            # внутри класса выходы совпадают по построению начального разбиения
            outputs[name] = {a: self.output(rep, a) for a in self.inputs}
        return MealyAutomaton(list(representatives), self.inputs, transitions, outputs)


class MooreAutomaton(Automaton):
    """outputs[state] – выход состояния, от входа не зависит."""

    flavor = "moore"

    def __init__(self, states, inputs, transitions, outputs):
        self.outputs = dict(outputs)
        super().__init__(states, inputs, transitions)

    def _validate(self):
        super()._validate()
        for s in self.states:
            if s not in self.outputs:
                raise FormatError(f"у состояния {s} нет выхода")

    def output(self, state, symbol=None):
        return self.outputs[state]

    def signature(self, state):
        return (self.outputs[state],)

    def step(self, state, symbol):
        target = self.next_state(state, symbol)
        return target, self.outputs[target]

    def _drop_outputs(self, doomed):
        for s in doomed:
            self.outputs.pop(s, None)

    def project(self, representatives, mapping):
        transitions = {}
        outputs = {}
        for name, rep in representatives.items():
            transitions[name] = {a: mapping[self.next_state(rep, a)] for a in self.inputs}
            outputs[name] = self.outputs[rep]
        return MooreAutomaton(list(representatives), self.inputs, transitions, outputs)
