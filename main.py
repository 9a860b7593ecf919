#!/usr/bin/env python3
import argparse
import sys

import table
import visualize
from errors import AutomatonError
from minimizer import FLAVORS, minimize_file

FLAVOR_NAMES = {'mealy': "Мили", 'moore': "Мура"}


def build_parser():
    # argv[1] – тип автомата: mealy или moore
    # argv[2] – имя входного файла CSV
    # argv[3] – имя выходного файла CSV (результат минимизации)
    parser = argparse.ArgumentParser(prog="minimize-automaton",
                                     description="Минимизация автомата Мили или Мура")
    parser.add_argument("flavor", choices=FLAVORS, help="Тип автомата: mealy или moore")
    parser.add_argument("input_file", help="Имя входного CSV файла")
    parser.add_argument("output_file", help="Имя выходного CSV файла с минимизированным автоматом")
    parser.add_argument("--rename", metavar="PREFIX",
                        help="Назвать состояния PREFIX0, PREFIX1, ... вместо прежних имён")
    parser.add_argument("--dot", metavar="PATH", help="Дополнительно нарисовать автомат через graphviz")
    parser.add_argument("--format", default="png", help="Формат графа graphviz (по умолчанию png)")
    parser.add_argument("-q", "--quiet", action="store_true", help="Не печатать сообщение о завершении")
    return parser


def run(args):
    text = table.read_text(args.input_file)
    # Тип автомата по файлу определяется только для предупреждения
    file_type = table.sniff_flavor(text)
    if file_type != args.flavor:
        print(f"Предупреждение: задан тип {args.flavor}, а файл определён как {file_type}.",
              file=sys.stderr)

    original_size, minimized = minimize_file(args.flavor, args.input_file, args.output_file,
                                             args.rename, text=text)

    if args.dot:
        visualize.render(minimized, args.dot, args.format)
    if not args.quiet:
        print(f"Минимизация автомата {FLAVOR_NAMES[args.flavor]} завершена: "
              f"{original_size} -> {len(minimized)} состояний. Результат записан в {args.output_file}")
    return minimized


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        run(args)
    except AutomatonError as e:
        print(f"Ошибка: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
