#!/usr/bin/env python3

import argparse
import logging

from aiohttp import web

from amfdec.amf0.decoder import Decoder, DEFAULT_MAX_DEPTH
from amfdec.inspect.handler import make_app

def main():
  parser = argparse.ArgumentParser(description=('amfdec: AMF0 inspection server'))

  parser.add_argument('--host', type=str, nargs='?', default='localhost')
  parser.add_argument('--port', type=int, nargs='?', default=8080)
  parser.add_argument('--max_size', type=int, nargs='?', default=1024 ** 2)
  parser.add_argument('--strict_boolean', action='store_true')
  parser.add_argument('--max_depth', type=int, nargs='?', default=DEFAULT_MAX_DEPTH)
  parser.add_argument('--log_level', type=str, nargs='?', default='INFO')

  args = parser.parse_args()
  logging.basicConfig(level=args.log_level.upper(), format='%(asctime)s %(levelname)s %(name)s: %(message)s')

  decoder = Decoder(strict_boolean=args.strict_boolean, max_depth=args.max_depth)
  web.run_app(make_app(decoder, args.max_size), host=args.host, port=args.port)

if __name__ == '__main__':
  main()
