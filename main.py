import argparse
import logging
import os
import sys

from nodelist.compress import collect_hostlist
from nodelist.errors import HostListError
from nodelist.expand import MAX_EXPANDED_HOSTS, expand_hostlist
from nodelist.frames import expand_node_column, explode_nodes, read_node_table
from nodelist.utils import readable_memory


def positive_int(s):
    try:
        value = int(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Not a valid integer: '{s}'.")
    if value <= 0:
        raise argparse.ArgumentTypeError(f"Not a positive integer: '{s}'.")
    return value


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Expand and compress Slurm-style host lists."
    )
    parser.add_argument("--verbose", action="store_true", help="Log debug messages")
    parser.add_argument("--stats", action="store_true",
                        help="Report host count and size of host names on stderr")
    parser.add_argument("--max-hosts", type=positive_int, default=MAX_EXPANDED_HOSTS,
                        help="Fail when an expansion yields more hosts than this")
    subparsers = parser.add_subparsers(dest="command", required=True)

    expand_parser = subparsers.add_parser("expand", help="Expand a hostlist, e.g. 'cn[01-04]'")
    expand_parser.add_argument("hostlist", help="Hostlist to expand")
    expand_parser.add_argument("--sep", default="\n", help="Separator between hosts (default newline)")

    compress_parser = subparsers.add_parser("compress", help="Compress host names into a hostlist")
    compress_parser.add_argument("hosts", nargs="*", help="Host names")
    compress_parser.add_argument("--file", help="File with whitespace separated host names")

    table_parser = subparsers.add_parser("table", help="Expand the node list column of sacct output")
    jobs_input_group = table_parser.add_mutually_exclusive_group(required=True)
    jobs_input_group.add_argument("--jobs-file", help="Single sacct log file")
    jobs_input_group.add_argument("--jobs-dir", help="Directory containing *.txt sacct log files")
    table_parser.add_argument("--column", default="nodelist", help="Node list column name")
    table_parser.add_argument("--output-dir", default=".", help="Path to write output files")

    return parser.parse_args(argv)


def validate_paths(args):
    if args.command == "compress":
        if not args.file:
            return None
        hosts_path = os.path.abspath(os.path.expanduser(args.file))
        if not os.path.isfile(hosts_path):
            sys.exit(f"Error: hosts file does not exist → {hosts_path}")
        return hosts_path

    # Jobs path
    if args.jobs_file:
        jobs_path = os.path.abspath(os.path.expanduser(args.jobs_file))
        if not os.path.isfile(jobs_path):
            sys.exit(f"Error: jobs file does not exist → {jobs_path}")
    else:
        jobs_path = os.path.abspath(os.path.expanduser(args.jobs_dir))
        if not os.path.isdir(jobs_path):
            sys.exit(f"Error: jobs directory does not exist → {jobs_path}")

    # Output directory
    output_dir = os.path.abspath(os.path.expanduser(args.output_dir))
    if not os.path.isdir(output_dir):
        sys.exit(f"Error: output directory does not exist → {output_dir}")

    return jobs_path, output_dir


def run_expand(args):
    hosts = expand_hostlist(args.hostlist, max_hosts=args.max_hosts)
    print(args.sep.join(hosts))
    return hosts


def run_compress(args):
    hosts = list(args.hosts)
    hosts_path = validate_paths(args)
    if hosts_path:
        with open(hosts_path) as f:
            hosts += f.read().split()

    if not hosts:
        sys.exit("Error: no host names given.")

    print(collect_hostlist(hosts))
    return hosts


def run_table(args):
    jobs_path, output_dir = validate_paths(args)
    column = args.column.lower()

    print(f"Jobs input: {jobs_path}")
    print(f"Output dir: {output_dir}")

    jobs = read_node_table(jobs_path)
    if column not in jobs.columns:
        sys.exit(f"Error: column '{args.column}' not found in {jobs_path}")

    nodes = explode_nodes(expand_node_column(jobs, column, max_hosts=args.max_hosts), column)

    node_report_path = os.path.join(output_dir, "NodeReport.csv")
    nodes.to_csv(node_report_path, index=False)
    print(f"Node report: {node_report_path}")
    return nodes[column].tolist()


COMMANDS = {
    "expand": run_expand,
    "compress": run_compress,
    "table": run_table,
}


def main(argv=None):
    args = parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        hosts = COMMANDS[args.command](args)
    except HostListError as e:
        sys.exit(f"Error: {e}")

    if args.stats:
        size = sum(len(host.encode()) for host in hosts)
        print(f"Hosts: {len(hosts)}", file=sys.stderr)
        print(f"Size: {readable_memory(size)}", file=sys.stderr)


if __name__ == "__main__":
    main()
