from heap_ import check_buffer_config


class HeapParams:
    def __init__(self, initial_capacity=10, growth_factor=2.0):
        self.initial_capacity = initial_capacity
        self.growth_factor = growth_factor

    def validate(self):
        check_buffer_config(self.initial_capacity, self.growth_factor)
        return self


class SimulationParams:
    def __init__(self, n_events=0, arrival_rate=1.0, n_nodes=1, seed=None):
        self.n_events = n_events
        self.arrival_rate = arrival_rate
        self.n_nodes = n_nodes
        self.seed = seed

    def validate(self):
        if self.n_events < 0:
            raise ValueError(f"n_events must be non-negative, got {self.n_events}")
        if self.arrival_rate <= 0:
            raise ValueError(f"arrival_rate must be positive, got {self.arrival_rate}")
        if self.n_nodes < 1:
            raise ValueError(f"n_nodes must be at least 1, got {self.n_nodes}")
        return self


def read_input(path):
    """Read ``parameter=value`` lines into heap and simulation parameters.

    Blank lines and lines starting with ``#`` are skipped.
    """
    heap_params = HeapParams()
    sim_params = SimulationParams()

    with open(path, "r") as input_file:
        for line in input_file:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                raise ValueError(f"Malformed line {line!r}, expected parameter=value")
            parameter, value = line.split("=", 1)
            parameter = parameter.strip()
            value = value.strip()

            if parameter == "initial_capacity":
                heap_params.initial_capacity = int(value)
            elif parameter == "growth_factor":
                heap_params.growth_factor = float(value)
            elif parameter == "n_events":
                sim_params.n_events = int(value)
            elif parameter == "arrival_rate":
                sim_params.arrival_rate = float(value)
            elif parameter == "n_nodes":
                sim_params.n_nodes = int(value)
            elif parameter == "seed":
                sim_params.seed = int(value)
            else:
                raise ValueError(f"Unknown parameter {parameter}")

    return heap_params.validate(), sim_params.validate()
