import os


class BenchConfig:
    """Represents benchmark configuration from config.json file"""

    def __init__(self, hash_factory, secret_length, salt_length, info, output_length, read_size,
                 num_experiments, results_file):
        self.hash_factory = hash_factory
        self.secret_length = secret_length
        self.salt_length = salt_length
        self.info = info
        self.output_length = output_length
        self.read_size = read_size
        self.num_experiments = num_experiments
        self.results_file = results_file
        self.secret = None
        self.salt = None
        self.add_inputs_to_config()

    def add_inputs_to_config(self):
        """Creates random input keying material and salt. A zero salt_length leaves the salt absent"""
        self.secret = os.urandom(self.secret_length)
        self.salt = os.urandom(self.salt_length) if self.salt_length else None
