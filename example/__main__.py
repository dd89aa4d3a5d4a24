"""
An example command-line application demonstrating how to integrate `flaghelp`.
"""
import sys

# In a real application, you would `import flaghelp`.
# For this example, we assume it's on the python path.
import flaghelp


def create_flags() -> flaghelp.Flags:
    """Builds the option registry for a pretend ping tool."""
    flags = flaghelp.Flags(
        "pping",
        "pping - Protocol Ping",
        "Tool to simulate TCP and UDP pings. This can also be used as a port scanner.",
        "[options] host port",
        "help",
    )
    flags.examples = [
        "-s 128 google.com 80",
        "-p udp -c 5 -t 1000 myserver.com 8085",
    ]

    # `default` is replaced by the default value; any other back-quoted
    # term becomes the parameter label shown next to the option.
    flags.add_int("s", 64, "Payload `size` in bytes `default`.")
    flags.add_int("i", 1000, "Interval `time` between pings in ms `default`.")
    flags.add_string(
        "p",
        "tcp",
        "Specify `protocol` to use. Valid values are `default`:\n"
        "- tcp: also supports 4 or 6 only counterparts.\n"
        "- udp: also supports 4 or 6 only counterparts.",
    )
    flags.add_bool(
        "w",
        False,
        "Wait for a response from the server. Ideally, this should be "
        "set when the protocol is set to udp.",
    )
    flags.add_int("c", 2**31 - 1, "Stop after sending specified `num`ber of pings.")
    return flags


def main():
    """Main entry point for the CLI application."""
    flags = create_flags()

    # STEP 1: Parse arguments as usual; operands are kept apart from options.
    args = flags.parse()
    operands = flags.args()

    # STEP 2: Print the help page and exit if -help was passed.
    flags.help()

    # --- Your normal application logic begins here ---
    print("--- Normal Application Execution ---")
    print(f"Received arguments: {vars(args)}")
    print(f"Received operands: {operands}")
    print("------------------------------------")
    if len(operands) != 2:
        flags.print_usage()
        sys.exit(2)
    host, port = operands
    print(
        f"Pinging {host}:{port} with {flags.value('s')} byte payloads "
        f"over {flags.value('p')}..."
    )
    if flags.value("w"):
        print(" (waiting for responses)")


if __name__ == "__main__":
    main()
