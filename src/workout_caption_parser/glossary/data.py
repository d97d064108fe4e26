"""Static workout glossary: format terms, exercises, equipment and body parts."""

from workout_caption_parser.glossary.reference_index import (
    ExerciseEntry as E,
    Glossary,
    NamedEntry,
    TermEntry as T,
)

EXERCISE_TERMS = (
    T("AMRAP", "format", ("as many reps as possible", "as many rounds as possible"),
      "Complete as many reps or rounds as possible within a time window."),
    T("EMOM", "format", ("every minute on the minute", "e1mom"),
      "Start prescribed work each minute; rest the remainder."),
    T("E2MOM", "format", ("every 2 minutes on the minute",),
      "Start prescribed work every 2 minutes; rest the remainder."),
    T("E3MOM", "format", ("every 3 minutes on the minute",),
      "Start prescribed work every 3 minutes; rest the remainder."),
    T("E4MOM", "format", ("every 4 minutes on the minute",),
      "Start prescribed work every 4 minutes; rest the remainder."),
    T("For Time", "format", ("ft", "complete for time"),
      "Complete the prescribed work as fast as possible; record total time."),
    T("Tabata", "format", ("tabata protocol",),
      "20s all-out effort, 10s rest, repeated for 8 rounds."),
    T("Chipper", "format", ("chip away", "chipper workout"),
      "A long single-round list of movements completed for time."),
    T("Superset", "structure", ("supersetting", "super set"),
      "Two exercises performed back-to-back without rest, then rest."),
    T("Circuit", "structure", ("circuit training", "circuit workout"),
      "A sequence of exercises performed one after another with minimal rest."),
    T("Ladder", "structure", ("rep ladder", "ascending ladder", "descending ladder"),
      "Reps ascend or descend each set in a pattern."),
    T("Drop Set", "technique", ("strip set", "dropset"),
      "Reduce weight immediately after near-failure and continue."),
    T("Pyramid Set", "structure", ("pyramid", "pyramid training"),
      "Increase weight and decrease reps each set or vice versa."),
    T("Complex", "structure", ("movement complex", "barbell complex", "dumbbell complex"),
      "Multiple exercises performed consecutively with the same implement."),
    T("HIIT", "intensity", ("high intensity interval training", "interval training"),
      "Short bursts of intense work alternated with rests."),
    T("Metcon", "intensity", ("metabolic conditioning", "metcon workout"),
      "High-intensity conditioning circuits."),
)

WORKOUT_STYLES = (
    T("CrossFit", "style", ("crossfit", "wod", "workout of the day")),
    T("Strength Training", "style", ("strength", "powerlifting", "max strength")),
    T("Bodybuilding", "style", ("hypertrophy", "muscle building")),
    T("Conditioning", "style", ("conditioning", "metabolic")),
    T("Functional Training", "style", ("functional", "athletic")),
    T("Warm-Up", "style", ("warm up", "warmup", "warm-up")),
    T("Cool-Down", "style", ("cool down", "cooldown")),
    T("Finisher", "style", ("finisher",)),
)

EXERCISES = (
    # Upper body - push
    E("Push-Up", ("push up", "push ups", "pushups", "push-ups", "pushup"),
      ("chest", "shoulders", "triceps", "core"), "bodyweight", ("reps", "time")),
    E("Bench Press", ("bench", "bb bench press", "barbell bench press", "db bench press", "dumbbell bench press"),
      ("chest", "shoulders", "triceps"), "barbell", ("sets", "reps", "load")),
    E("Overhead Press", ("shoulder press", "military press", "strict press", "press", "db shoulder press"),
      ("shoulders", "triceps", "core"), "barbell", ("sets", "reps", "load")),
    E("Push Press", ("push presses", "bb push press", "db push press"),
      ("shoulders", "triceps", "legs"), "barbell", ("reps", "load")),
    E("Dumbbell Fly", ("db fly", "chest fly", "dumbbell flye"),
      ("chest",), "dumbbell", ("sets", "reps", "load")),
    E("Lateral Raise", ("side raise", "db lateral raise", "lateral raises"),
      ("shoulders",), "dumbbell", ("sets", "reps", "load")),
    E("Dip", ("dips", "ring dips", "bar dips"),
      ("chest", "triceps"), "bodyweight", ("reps",)),
    E("Handstand Push-Up", ("hspu", "handstand push ups", "handstand push-ups"),
      ("shoulders", "triceps"), "bodyweight", ("reps",)),

    # Upper body - pull
    E("Pull-Up", ("pullup", "pull up", "pull ups", "pullups", "pull-ups"),
      ("back", "biceps"), "pull-up bar", ("reps", "sets")),
    E("Chin-Up", ("chinup", "chin up", "chin ups", "chinups", "chin-ups"),
      ("back", "biceps"), "pull-up bar", ("reps", "sets")),
    E("Muscle-Up", ("muscle up", "muscle ups", "muscle-ups", "ring muscle up", "bar muscle up"),
      ("back", "chest", "triceps"), "pull-up bar", ("reps",)),
    E("Toes-to-Bar", ("toes to bar", "t2b", "ttb"),
      ("core", "grip"), "pull-up bar", ("reps",)),
    E("Bent-Over Row", ("bb row", "barbell row", "db row", "dumbbell row", "bent over row", "bent over rows"),
      ("back", "biceps"), "barbell", ("sets", "reps", "load")),
    E("Kettlebell Gorilla Row", ("kb gorilla row", "gorilla row", "gorilla rows", "kb gorilla rows"),
      ("back", "biceps", "core"), "kettlebell", ("reps", "load")),
    E("Biceps Curl", ("db curl", "barbell curl", "hammer curl", "curls", "bicep curl", "bicep curls"),
      ("biceps",), "dumbbell", ("sets", "reps", "load")),
    E("Triceps Extension", ("tricep extension", "overhead extension", "skull crusher", "skull crushers"),
      ("triceps",), "dumbbell", ("sets", "reps", "load")),

    # Lower body
    E("Squat", ("squats", "air squat", "air squats", "bodyweight squat", "bodyweight squats"),
      ("quadriceps", "glutes"), "bodyweight", ("reps", "time")),
    E("Back Squat", ("back squats", "bb squat", "barbell squat", "barbell back squat"),
      ("quadriceps", "glutes", "hamstrings"), "barbell", ("sets", "reps", "load")),
    E("Front Squat", ("front squats", "bb front squat"),
      ("quadriceps", "glutes", "core"), "barbell", ("sets", "reps", "load")),
    E("Goblet Squat", ("goblet squats", "kb goblet squat", "db goblet squat"),
      ("quadriceps", "glutes", "core"), "kettlebell", ("sets", "reps", "load")),
    E("Dumbbell Back Squat", ("db back squat", "dumbbell squat", "db squat"),
      ("quadriceps", "glutes", "hamstrings"), "dumbbell", ("sets", "reps", "load")),
    E("Deadlift", ("dl", "deadlifts", "conventional deadlift", "sumo deadlift"),
      ("glutes", "hamstrings", "back", "core"), "barbell", ("sets", "reps", "load")),
    E("Romanian Deadlift", ("rdl", "rdls", "romanian dl", "stiff leg deadlift"),
      ("hamstrings", "glutes", "back"), "barbell", ("sets", "reps", "load")),
    E("Lunge", ("lunges", "forward lunge", "walking lunge", "walking lunges"),
      ("quadriceps", "glutes", "hamstrings"), "bodyweight", ("reps", "distance")),
    E("Reverse Lunge", ("reverse lunges", "backward lunge"),
      ("quadriceps", "glutes", "hamstrings"), "bodyweight", ("reps",)),
    E("Sandbag Lunge", ("sandbag lunges", "sb lunge", "sb lunges"),
      ("quadriceps", "glutes", "hamstrings", "core"), "sandbag", ("reps", "load")),
    E("Hip Thrust", ("hip thrusts", "glute bridge", "bb hip thrust"),
      ("glutes", "hamstrings"), "barbell", ("sets", "reps", "load")),
    E("Calf Raise", ("calf raises", "standing calf raise"),
      ("calves",), "bodyweight", ("sets", "reps")),
    E("Box Jump", ("box jumps", "jump ups"),
      ("quadriceps", "glutes", "calves"), "box", ("reps",)),
    E("Box Step Up", ("box step ups", "step ups", "step-ups", "step up"),
      ("quadriceps", "glutes"), "box", ("reps",)),

    # Full body
    E("Burpee", ("burpees", "burpee to plate", "burpees to plate"),
      ("full-body",), "bodyweight", ("reps", "time")),
    E("Burpee Over Box", ("burpee over obstacle", "box burpee", "burpee box jump over"),
      ("full-body",), "box", ("reps",)),
    E("Burpee Broad Jump", ("burpee broad jumps",),
      ("full-body",), "bodyweight", ("reps", "distance")),
    E("Thruster", ("thrusters", "bb thruster", "db thruster", "db thrusters"),
      ("quadriceps", "glutes", "shoulders", "core"), "barbell", ("sets", "reps", "load")),
    E("Clean and Jerk", ("clean & jerk", "c&j"),
      ("full-body",), "barbell", ("reps", "load")),
    E("Power Clean", ("power cleans", "hang power clean"),
      ("glutes", "hamstrings", "back", "shoulders"), "barbell", ("reps", "load")),
    E("Snatch", ("snatches", "power snatch", "squat snatch"),
      ("full-body",), "barbell", ("reps", "load")),
    E("Dumbbell Snatch", ("db snatch", "db snatches", "dumbbell snatches"),
      ("full-body",), "dumbbell", ("reps", "load")),
    E("Kettlebell Swing", ("kb swing", "kb swings", "russian swing", "full kb swings", "kettlebell swings"),
      ("glutes", "hamstrings", "back", "core"), "kettlebell", ("reps", "time")),
    E("Kettlebell Swing (American)", ("american kb swing", "overhead swing", "full swing", "american swings"),
      ("glutes", "hamstrings", "back", "core", "shoulders"), "kettlebell", ("reps", "time")),
    E("Kettlebell Dead Tap Swing", ("dead tap swings", "kb dead swing"),
      ("glutes", "hamstrings", "back", "core"), "kettlebell", ("reps",)),
    E("Kettlebell Clean", ("kb clean", "kb cleans", "kettlebell cleans"),
      ("glutes", "hamstrings", "back", "shoulders"), "kettlebell", ("reps", "load")),
    E("Goblet Clean", ("goblet cleans", "kb goblet clean"),
      ("glutes", "hamstrings", "back", "shoulders"), "kettlebell", ("reps", "load")),
    E("Devil Press", ("devils press", "devil's press", "db devil press", "devil presses"),
      ("full-body",), "dumbbell", ("reps", "load")),
    E("Farmer Carry", ("farmers carry", "farmer walk", "farmers walk", "farmer's carry"),
      ("grip", "traps", "core", "legs"), "dumbbell", ("distance", "time", "load")),
    E("Wall Ball", ("wall balls", "wall ball shot", "wall ball shots"),
      ("quadriceps", "glutes", "shoulders", "core"), "medicine ball", ("reps", "load")),
    E("Sled Push", ("sled pushes",),
      ("quadriceps", "glutes", "calves"), "sled", ("distance", "load")),
    E("Sled Pull", ("sled pulls", "sled drag"),
      ("back", "hamstrings", "grip"), "sled", ("distance", "load")),
    E("Double Under", ("double unders", "dus", "du"),
      ("calves", "shoulders"), "jump rope", ("reps", "time")),
    E("Jumping Jack", ("jumping jacks",),
      ("full-body",), "bodyweight", ("reps", "time")),

    # Cardio machines and running
    E("Row", ("rowing", "erg", "rower", "row erg"),
      ("back", "legs", "core"), "rower", ("distance", "time", "calories")),
    E("SkiErg", ("ski", "ski erg", "skiing", "skierg"),
      ("back", "core", "triceps"), "skierg", ("distance", "time", "calories")),
    E("Bike", ("biking", "assault bike", "echo bike", "air bike", "bike erg"),
      ("legs", "core"), "bike", ("distance", "time", "calories")),
    E("Run", ("running", "runs", "jog", "jogging", "treadmill"),
      ("legs", "core"), "bodyweight", ("distance", "time")),

    # Core
    E("Plank", ("planks", "front plank", "plank hold"),
      ("core", "shoulders"), "bodyweight", ("time",)),
    E("Mountain Climbers", ("mountain climber", "mt climbers"),
      ("core", "shoulders"), "bodyweight", ("reps", "time")),
    E("Sit-Up", ("sit up", "sit ups", "situps", "sit-ups", "abmat sit ups"),
      ("core",), "bodyweight", ("reps",)),
    E("Russian Twist", ("russian twists",),
      ("core",), "bodyweight", ("reps", "time")),
    E("Hollow Hold", ("hollow body hold", "hollow rock", "hollow rocks"),
      ("core",), "bodyweight", ("time", "reps")),
)

EQUIPMENT = (
    NamedEntry("Barbell", ("bb", "barbell")),
    NamedEntry("Dumbbell", ("db", "dumbbell", "dumbbells", "dbs")),
    NamedEntry("Kettlebell", ("kb", "kettlebell", "kettlebells", "kbs")),
    NamedEntry("Bodyweight", ("bw", "bodyweight", "body weight")),
    NamedEntry("Medicine Ball", ("med ball", "medicine ball", "wall ball", "mb")),
    NamedEntry("Sandbag", ("sb", "sandbag", "sand bag")),
    NamedEntry("Box", ("plyo box", "jump box", "step", "box")),
    NamedEntry("Rower", ("rower", "erg", "row erg", "rowing machine")),
    NamedEntry("SkiErg", ("skierg", "ski erg", "ski ergometer")),
    NamedEntry("Bike", ("bike", "assault bike", "echo bike", "air bike", "stationary bike")),
    NamedEntry("Bench", ("bench", "weight bench")),
    NamedEntry("Cable", ("cable machine", "cables")),
    NamedEntry("Machine", ("machine", "weight machine")),
    NamedEntry("Resistance Band", ("band", "resistance band", "bands")),
    NamedEntry("Sled", ("sled", "prowler")),
    NamedEntry("Jump Rope", ("jump rope", "skipping rope", "rope")),
    NamedEntry("Pull-Up Bar", ("pull-up bar", "pull up bar", "pullup bar", "rig")),
)

BODY_PARTS = (
    NamedEntry("Chest", ("chest", "pecs", "pectorals")),
    NamedEntry("Back", ("back", "lats", "upper back", "latissimus", "rhomboids", "traps")),
    NamedEntry("Shoulders", ("shoulders", "delts", "deltoids")),
    NamedEntry("Arms", ("arms", "biceps", "triceps", "forearms", "grip")),
    NamedEntry("Legs", ("legs", "lower body", "leg day", "quads", "quadriceps", "hamstrings", "glutes", "calves")),
    NamedEntry("Core", ("core", "abs", "abdominals", "trunk")),
    NamedEntry("Full Body", ("full body", "full-body", "total body", "compound")),
)

DEFAULT_GLOSSARY = Glossary(
    exercise_terms=EXERCISE_TERMS,
    exercises=EXERCISES,
    workout_styles=WORKOUT_STYLES,
    equipment=EQUIPMENT,
    body_parts=BODY_PARTS,
)
