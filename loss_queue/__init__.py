"""Single-server loss queue simulator.

A Poisson stream of requests is offered to one server with exponential
service times and no waiting room: a request that finds the server busy is
lost. The simulator estimates the rate of the output (served) stream over a
finite horizon.

Components:
- a deterministic 32-bit linear congruential stream (`uniform`)
- an exponential sampler on top of it (`sampling`)
- the Poisson arrival process (`arrival`)
- the single-server admission-control device (`service`)
- the running output-rate estimator (`estimator`)
- the event loop and report (`driver`), and the CLI (`app`)
"""
