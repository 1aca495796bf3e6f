# ==================================================
# examples/dump_strfile.py
# ==================================================
import argparse, logging, sys
from strfile_reader import parse, read_record, read_records

def main(argv=None):
    p = argparse.ArgumentParser()
    p.add_argument("data", help="path to the fortune text file")
    p.add_argument("--index", help="path to the strfile index (default: DATA.dat)")
    p.add_argument("--record", type=int, help="print only this record number")
    p.add_argument("--header", action="store_true", help="print header fields and exit")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format="%(asctime)s - %(levelname)s - %(name)s - %(message)s")

    hdr = parse(args.index or args.data + ".dat")
    if args.header:
        print(f"version:  {hdr.version}")
        print(f"count:    {hdr.count}")
        print(f"longest:  {hdr.longest_length}")
        print(f"shortest: {hdr.shortest_length}")
        print(f"flags:    {hdr.flags:#x}"
              f" random={hdr.is_random} ordered={hdr.is_ordered}"
              f" rotated={hdr.is_rotated} comments={hdr.has_comments}")
        print(f"delim:    {hdr.delimiter.decode('latin-1')}")
        return 0

    if args.record is not None:
        text = read_record(args.data, hdr, args.record)
        sys.stdout.write(text)
        if text and not text.endswith("\n"):
            sys.stdout.write("\n")
        return 0

    sep = hdr.delimiter.decode("latin-1") + "\n"
    for i, text in enumerate(read_records(args.data, hdr)):
        if i:
            sys.stdout.write(sep)
        sys.stdout.write(text)
        if text and not text.endswith("\n"):
            sys.stdout.write("\n")
    return 0

if __name__ == "__main__":
    sys.exit(main())
