from collections import deque


# Обход в ширину от начального состояния; состояния в порядке обнаружения
def reachable_states(machine):
    reachable = [machine.start]
    seen = {machine.start}
    queue = deque([machine.start])
    while queue:
        s = queue.popleft()
        for a in machine.inputs:
            nxt = machine.next_state(s, a)
            if nxt not in seen:
                seen.add(nxt)
                reachable.append(nxt)
                queue.append(nxt)
    return reachable


# Удаление недостижимых состояний (на месте). Возвращает удалённые состояния.
def remove_unreachable(machine):
    reachable = set(reachable_states(machine))
    doomed = [s for s in machine.states if s not in reachable]
    if doomed:
        machine.remove_states(doomed)
    return doomed
