import csv
import json
import os
import time

import hkdf

from streamkdf import kdf, validate
from streamkdf.bench import bench_config
from streamkdf.custom_errors import DerivationMismatchError

DEFAULT_CONFIG = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config_files', 'config.json')


def load_config(config_path):
    """Checks that data provided in the config json is valid and builds the benchmark config.
       results_file is taken relative to the current working directory"""
    with open(config_path) as json_file:
        data = json.load(json_file)
        hash_factory = validate.check_hash_name(data, 'hash')
        secret_length = validate.check_non_negative_int(data, 'secret_length')
        salt_length = validate.check_non_negative_int(data, 'salt_length')
        info = validate.check_string(data, 'info').encode('utf-8')
        output_length = validate.check_output_length(validate.check_positive_int(data, 'output_length'),
                                                     hash_factory)
        read_size = validate.check_positive_int(data, 'read_size')
        num_experiments = validate.check_positive_int(data, 'num_experiments')
        results_file = validate.check_string(data, 'results_file')
    return bench_config.BenchConfig(hash_factory, secret_length, salt_length, info, output_length, read_size,
                                    num_experiments, results_file)


def stream_derive(config):
    """Derive output_length bytes with the streaming expander, read_size bytes at a time"""
    expander = kdf.derive(config.hash_factory, config.secret, config.salt, config.info)
    okm = bytearray()
    while len(okm) < config.output_length:
        okm += expander.read(min(config.read_size, config.output_length - len(okm)))
    return bytes(okm)


def one_shot_derive(config):
    """Derive output_length bytes in a single call with the hkdf package"""
    prk = hkdf.hkdf_extract(config.salt, config.secret, hash=config.hash_factory)
    return hkdf.hkdf_expand(prk, config.info, config.output_length, hash=config.hash_factory)


def derive_x_times(config):
    """Time both derivations a given number of times, check they agree and record results in the
       results file. Returns the list of (stream time, one-shot time) pairs"""
    timings = []
    for i in range(config.num_experiments):
        config.add_inputs_to_config()
        start = time.perf_counter()
        streamed = stream_derive(config)
        middle = time.perf_counter()
        one_shot = one_shot_derive(config)
        end = time.perf_counter()
        if streamed != one_shot:
            raise DerivationMismatchError(f"Run {i}: streamed output does not match hkdf output")
        timings.append((middle - start, end - middle))
    print(f"Derived {config.output_length} bytes {config.num_experiments} times")

    # write results
    results_dir = os.path.dirname(config.results_file)
    if results_dir:
        os.makedirs(results_dir, exist_ok=True)
    with open(config.results_file, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(['Run Num', 'Stream Time', 'One-shot Time'])
        for i, (stream_time, one_shot_time) in enumerate(timings):
            writer.writerow([i, stream_time, one_shot_time])
    print(f"Results written to {config.results_file}")
    return timings


def main(config_path=DEFAULT_CONFIG):
    config = load_config(config_path)
    derive_x_times(config)


if __name__ == '__main__':
    main()
