"""Editor modules: the module base class, input tracking, window state and the engine bridge."""