"""Console user-interface cells, borders, elements and layers."""