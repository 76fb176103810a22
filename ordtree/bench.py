import getopt
import random
import sys
import os
import time

from . import log
from .exception import OrdTreeError, InvalidSizeError, InputParseError
from .tree import OrderedTree
from .version import __version__

RANDOM_MIN = -2**31
RANDOM_MAX = 2**31 - 1

TRAVERSALS = ('inorder', 'preorder', 'postorder')

def parse_size(s):
    try:
        return int(s)
    except ValueError:
        raise InvalidSizeError("`", s, "'")

def read_sizes(f, source):
    """Yields whitespace separated sizes from the lines of f."""
    for i, line in enumerate(f):
        i += 1
        for token in line.split():
            try:
                yield int(token)
            except ValueError:
                raise InputParseError(source, i,
                        "invalid tree size `" + token + "'")

def random_values(rnd, size):
    return (rnd.randint(RANDOM_MIN, RANDOM_MAX) for i in range(size))

def ascending_values(size):
    return range(1, size + 1)

def build_tree(values):
    """Inserts values into a new tree.

    Returns the tree and the seconds spent."""
    starttime = time.monotonic()
    tree = OrderedTree()
    for v in values:
        tree.insert(v)
    elapsed = time.monotonic() - starttime
    return (tree, elapsed)

def format_traversal(values):
    return ' '.join(map(str, values))

def report(tree, elapsed, options, out):
    out.write("compares = {0:d}   time= {1}".format(tree.compares, elapsed))
    if options['height']:
        out.write("   height= {0:d}".format(tree.height()))
    out.write("\n")
    if options['traversal'] is not None:
        traverse = getattr(tree, options['traversal'])
        out.write(format_traversal(traverse(tree.root)) + "\n")

def run_benchmark(size, options, rnd, out):
    cs = log.logger.colors
    log.info("building trees of size ", cs.wrap(cs.SIZE, str(size)))
    if options['random']:
        tree, elapsed = build_tree(random_values(rnd, size))
        log.debug1("random tree: ", len(tree), " distinct values")
        report(tree, elapsed, options, out)
    if options['ascending']:
        tree, elapsed = build_tree(ascending_values(size))
        log.debug1("ascending tree: ", len(tree), " distinct values")
        report(tree, elapsed, options, out)

def bench_main(argv):
    log.logger = log.Logger()
    (options, sizes) = parse_arguments(argv)

    rnd = random.Random(options['seed'])
    try:
        if sizes is None:
            sizes = read_sizes(sys.stdin, '<stdin>')
        for size in sizes:
            if size <= 0:
                log.debug1("non-positive size ", size, ", stopping")
                break
            run_benchmark(size, options, rnd, sys.stdout)
            sys.stdout.flush()
    except OrdTreeError as e:
        log.fatal(e)
    except IOError as e:
        log.fatal(str(e))
    return 0

def default_options():
    opts = {
            'seed' : None,
            'random' : True,
            'ascending' : True,
            'traversal' : None,
            'height' : False,
            }
    return opts

def invalid_argument(opt, arg):
    log.fatal_exit(2, "invalid " + opt + " argument `" + str(arg) + "'")

def parse_arguments(argv):
    long_opts = [
            'ascending-only',
            'color=',
            'height',
            'help',
            'random-only',
            'seed=',
            'traversal=',
            'verbose',
            'version'
    ]
    options = default_options()
    opts = 'Hahrs:t:v'
    try:
        opts, args = getopt.gnu_getopt(argv[1:], opts, long_opts)
    except getopt.GetoptError as err:
        log.fatal_exit(2, err, "\n", "Try `",
                str(os.path.basename(argv[0])),
                " --help' for more information.")

    for opt, arg in opts:
        if opt in ('-h', '--help'):
            usage(os.path.basename(argv[0]))
            sys.exit(0)

        elif opt in ('-a', '--ascending-only'):
            options['random'] = False

        elif opt in ('-r', '--random-only'):
            options['ascending'] = False

        elif opt in ('-s', '--seed'):
            try:
                options['seed'] = int(arg, 0)
            except ValueError:
                invalid_argument(opt, arg)

        elif opt in ('-t', '--traversal'):
            if arg not in TRAVERSALS:
                invalid_argument(opt, arg)
            options['traversal'] = arg

        elif opt in ('-H', '--height'):
            options['height'] = True

        elif opt in ('-v', '--verbose'):
            log.logger.loglevel += 1

        elif opt in ('--color',):
            try:
                log.logger.set_colors(arg)
            except ValueError:
                invalid_argument(opt, arg)

        elif opt in ('--version',):
            version()
            sys.exit(0)

        else:
            invalid_argument(opt, "")

    if not options['random'] and not options['ascending']:
        log.fatal_exit(2, 'Invalid arguments: use -a xor -r')

    sizes = None
    if len(args) > 0:
        try:
            sizes = [parse_size(a) for a in args]
        except InvalidSizeError as e:
            log.fatal_exit(2, e)

    return (options, sizes)

def version():
    sys.stdout.write("ordtree " + __version__ + "\n")

def usage(program_name):
    sys.stdout.write(
            'Usage: {0:s} [option]... [size]...'
            .format(program_name))
    sys.stdout.write(
'''
Build binary search trees from random and from ascending integers and report
the number of comparisons and the time spent on insertion.
Sizes are read from standard input if none are given on the command line.
Processing stops at the first size that is not positive.

Options:
      --version              show program's version number and exit
  -h, --help                 show this help message and exit
  -v, --verbose              increase verbosity level (use multiple times for
                               greater effect)
      --color=WHEN           colorize output; WHEN can be 'auto' (default),
                               'always' or 'never'.

Benchmark:
  -s, --seed=N               seed the random number generator with N
  -r, --random-only          only build trees from random integers
  -a, --ascending-only       only build trees from 1..size
  -t, --traversal=ORDER      print the traversal of every tree built; ORDER
                               can be 'inorder', 'preorder' or 'postorder'
  -H, --height               report the height of every tree built
''')

def main():
    try:
        sys.exit(bench_main(sys.argv))
    except KeyboardInterrupt:
        sys.stderr.write("\nreceived SIGINT, terminating\n")
        sys.exit(3)
