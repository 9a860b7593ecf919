from errors import InvariantError


def state_names(blocks, rename=None):
    """
    Имена состояний минимального автомата, по одному на класс.
    По умолчанию берётся имя представителя (первого состояния класса),
    с rename – новые имена вида f"{rename}{i}".
    """
    if rename is None:
        return [block[0] for block in blocks]
    return [f"{rename}{i}" for i in range(len(blocks))]


def build_minimized(machine, partition, rename=None):
    blocks = partition.blocks()
    if not blocks or machine.start not in blocks[0]:
        raise InvariantError("начальное состояние должно быть в первом классе")
    names = state_names(blocks, rename)
    if len(set(names)) != len(names):
        raise InvariantError("имена состояний минимального автомата повторяются")
    # Представитель класса и отображение: старое состояние -> новое имя
    representatives = {}
    mapping = {}
    for name, block in zip(names, blocks):
        representatives[name] = block[0]
        for s in block:
            mapping[s] = name
    return machine.project(representatives, mapping)
