#!/usr/bin/env python3

import argparse
import logging
import sys

from amfdec.amf0.decoder import Decoder, DEFAULT_MAX_DEPTH
from amfdec.amf0.errors import DecodeError
from amfdec.inspect.handler import dumps, render

def main(argv: list[str] | None = None) -> int:
  parser = argparse.ArgumentParser(description=('amfdec: AMF0 payload inspector'))

  parser.add_argument('-i', '--input', type=argparse.FileType('rb'), nargs='?', default=sys.stdin.buffer)
  parser.add_argument('--native', action='store_true')
  parser.add_argument('--strict_boolean', action='store_true')
  parser.add_argument('--max_depth', type=int, nargs='?', default=DEFAULT_MAX_DEPTH)
  parser.add_argument('--log_level', type=str, nargs='?', default='WARNING')

  args = parser.parse_args(argv)
  logging.basicConfig(level=args.log_level.upper(), format='%(levelname)s %(name)s: %(message)s')

  decoder = Decoder(strict_boolean=args.strict_boolean, max_depth=args.max_depth)
  with args.input as reader:
    data = reader.read()

  try:
    values = decoder.decode(data)
  except DecodeError as e:
    print(f'{args.input.name}: {type(e).__name__}: {e}', file=sys.stderr)
    return 1

  for value in render(values, args.native):
    print(dumps(value))
  return 0

if __name__ == '__main__':
  sys.exit(main())
