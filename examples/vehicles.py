from proto import proto, this, parent, typeof, clone

def engine_main(cyl):
    this().force = 0
    this().cyl = cyl

    def gas():
        parent().force += 1
        print("Engine force is now {}".format(parent().force))
    this().gas = gas

    return this()
# every vehicle needs an engine
engine = proto(engine_main, "engine")

def vehicle_main(engine):
    this().engine = engine

    def gas():
        parent().engine.gas()
    this().gas = gas

    return this()
# a vehicle can only give its engine gas
vehicle = proto(vehicle_main, "vehicle")

def car_main(engine):
    proto(vehicle(engine))

    def roll():
        if parent().engine.force < 1:
            print("Not enough force to roll, give it some gas.")
        else:
            print("Rolling...")
    this().roll = roll

    return this()
car = proto(car_main, "car")

def plane_main(engine):
    proto(vehicle(engine))

    def fly():
        if parent().engine.force < 2:
            print("Not enough force to fly, give it some gas.")
        else:
            print("Flying...")
    this().fly = fly

    return this()
plane = proto(plane_main, "plane")

def amphibious_main(engine):
    # rolls and flies without implementing either
    proto(car(engine))
    proto(plane(engine))

    return this()
amphibious = proto(amphibious_main, "amphibious")

def main():
    m_engine = clone(engine(8))

    m_car = clone(car(m_engine))
    m_car.gas()
    m_car.roll()

    m_plane = clone(plane(m_engine))
    m_plane.gas()
    m_plane.gas()
    m_plane.fly()

    # the amphibious vehicle takes over the plane's engine
    m_amphib = clone(amphibious(m_plane.engine))
    m_amphib.roll()
    m_amphib.fly()
    print(typeof(m_amphib))

    def broken():
        print("This car is broken, sorry!")
    m_car.roll = broken
    m_car.roll()

    # a new car can reuse the engine
    n_car = clone(car(m_car.engine))
    n_car.roll()

if __name__ == "__main__":
    main()
