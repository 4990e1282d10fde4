from rich.pretty import pprint

from flagship import *


search = path_search(
    default_path="~/tools/suite/bin",
    utils=("align", "index"),
    environment_var="SUITE_PATH",
    option_name="suite.path",
)


def align(input, threads=1, *, verbose=False, preset=None, **extra):
    flags = interpret(args_all(drop={"input"}), {"threads": "t", "verbose": "v"})
    return ["align", *serialize(drop(flags, {"t": "1"})), input]


if __name__ == '__main__':
    pprint(search)
    pprint(align("reads.fq", threads=4, verbose=True, kmers=[15, 17]))
    install_check(search)
