random_seed = None # None seeds each cache's generator from os entropy, set an int for repeatable evictions
verbose = False # log cache construction to stderr
stats_max_size = 16
stats_num_inserts = 100000 # for a flat histogram this should be many times stats_max_size
