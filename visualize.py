from graphviz import CalledProcessError, Digraph, ExecutableNotFound

from errors import RenderError


def _edge_labels(machine):
    # (откуда, куда) -> подписи; параллельные дуги сливаются в одну
    edges = {}
    for s in machine.states:
        for a in machine.inputs:
            target = machine.next_state(s, a)
            if machine.flavor == 'mealy':
                label = f"{a}/{machine.output(s, a)}"
            else:
                label = a
            edges.setdefault((s, target), []).append(label)
    return edges


def build_graph(machine):
    dot = Digraph(comment=machine.flavor.capitalize())
    dot.attr(rankdir="LR")

    for s in machine.states:
        if machine.flavor == 'moore':
            dot.node(s, label=f"{s}/{machine.outputs[s]}", shape="circle")
        else:
            dot.node(s, shape="circle")

    dot.node("", shape="none")
    dot.edge("", machine.start)

    for (s, target), labels in _edge_labels(machine).items():
        dot.edge(s, target, label=", ".join(labels))
    return dot


def render(machine, filename, fmt="png"):
    dot = build_graph(machine)
    output_path = filename.rsplit(".", 1)[0] if filename.endswith("." + fmt) else filename
    try:
        return dot.render(output_path, format=fmt, cleanup=True)
    except (ExecutableNotFound, CalledProcessError, ValueError, OSError) as e:
        raise RenderError(f"не удалось построить граф {output_path}: {e}") from e
