from rich.console import Console
from rich.pretty import pprint

from optscan import *

console = Console()


# python main.py -ba42 -v -z -- -w arg1 arg2
def main():
    # -a requires an argument
    # -b and -v have no arguments
    # -z may have an optional argument
    try:
        scanner = Scanner.fromsys("a:bz::v")
    except InvalidGrammarError as error:
        report(error)
        return 2

    prog = scanner.progname
    try:
        for option in scanner:
            if option.hasarg:
                console.print("%s: got option %r with arg %r" % (prog, option.character, option.argument), markup=False)
            else:
                console.print("%s: got option %r" % (prog, option.character), markup=False)
    except ScanException as error:
        report(error, prog=prog)

    console.print("%s: remaining arguments: %r" % (prog, scanner.remaining()), markup=False)
    pprint(scanner)
    return 0 if scanner.error is None else 1


if __name__ == '__main__':
    raise SystemExit(main())
