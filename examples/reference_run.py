import minipercolation as mini

# the reference run: 20x20x20 at p = 0.15, four files in the working directory
simulation = mini.Simulation(mini.Config(extent=20, probability=0.15))
outcomes = simulation.run()

print( simulation.lattice )
for outcome in outcomes:
    print( outcome.name, 'ok' if outcome.ok else outcome.error )
