from chargebox.Sources.Source import Source, RandomProtonSource, ElectronRingSource, PointSource
